# gbadraw

Tools around a Game Boy Advance digit-drawing application:

- `gbadraw.canvas` models the 240×160 framebuffer of 15-bit pixels
  (`Framebuffer`) and the 14×14 drawing pad driven by the console's buttons
  (`DrawingPad`, `Key`), together with `Position`, `Color` and `rgb15`.
- `gbadraw.img_ops` turns the 14×14 pad into a 28×28 grayscale image:
  `duplicate_array_size`, `boolean_to_grayscale`, `gaussian_blur_3x3`.
- `gbadraw.digits` holds the 8-row by 7-column 15-bit colour bitmaps of the
  digits 0–9 (`digit_bitmap`, `DIGITS`).
- `gbadraw.gbafix` validates and patches GBA ROM headers, and provides the
  `gbafix` command.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Drawing and preprocessing

```python
from gbadraw.canvas import DrawingPad, Key, make_prediction

pad = DrawingPad()
pad.press(Key.A)        # toggle the cell under the cursor
pad.press(Key.RIGHT)    # move the cursor one cell to the right
pad.press(Key.A)
image = pad.preprocess()  # 28×28 blurred grayscale image
print(make_prediction(image))
```

`DrawingPad.press` handles one press of a key (or several `Key` flags
combined). Arrow keys move the cursor by one cell and stop at the edges of
the grid; `Key.A` toggles the cell under the cursor and paints it black or
light grey; `Key.START` runs `preprocess`, passes the image to the
predictor, draws the predicted digit into the framebuffer at (121, 150) and
returns the prediction. Every other press returns `None`.

`preprocess` doubles each cell of the grid, maps set pixels to 255 and clear
ones to 0, and blurs the result with a 3×3 Gaussian kernel whose edges are
clamped.

`Framebuffer` keeps its pixels in a row-major list (`pixels`) and can be
read with `fb[x, y]`; drawing off the screen raises `IndexError`.
`Framebuffer.draw_prediction` draws nothing for values outside 0–9.

### Predictors

`make_prediction` checks that its input is 28×28 and always answers 9. Pass
a callable of your own as `DrawingPad(predictor=...)` to plug in a real
classifier; it receives the 28×28 image as a list of lists of ints and
returns a digit.

## Fixing a ROM header

```
gbafix game.gba -t -cABCD -m01 -r1 -p
```

The first argument that does not start with `-` is the ROM file. Options:

- `-p` pad the file with `0xFF` bytes to the next power of two
- `-t[<title>]` patch the title; without a value the file name, stripped of
  directories and extension, is used (and printed)
- `-c<game_code>` patch the four-character game code
- `-m<maker_code>` patch the two-character maker code
- `-r<version>` patch the game version (a number, decimal, octal or `0x` hex)
- `-d<debug>` enable the debug handler and set its entry point (0 or 1)
- `-v` accepted and ignored

Without arguments the command prints its usage and exits with status 1. It
also exits with status 1 when no file name is given or the file cannot be
opened or holds no complete 192-byte header. Unknown options and `-r`/`-d`
without a value are reported and skipped.

The logo, the fixed byte and the device type are always restored, the
checksum field is set to 0, and the header complement is recomputed before
the header is written back.

From Python, `fix_rom(path, options)` does the same work and returns the
header written together with the messages produced; it raises `GbaFixError`
on failure. Headers can be inspected with `unpack_header`, `RomHeader`
(`pack`, `complement`) and `header_complement`; `padded_size` and
`title_from_path` expose the padding and title rules.

## What this package does not do

It does not run on the console or display anything: the framebuffer is an
in-memory list of pixels and key presses are method calls. It ships no
trained digit classifier, and it does not build or link ROM images; `gbafix`
only patches the header of an existing file.