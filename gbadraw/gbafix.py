"""Validate and patch the header of a GBA cartridge image."""

from __future__ import annotations

import os
import struct
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

VERSION = "1.05"

HEADER_SIZE = 0xC0
_HEADER = struct.Struct("<I156s12sIHBBB7sBBH")

LOGO = bytes.fromhex(
    "24FFAE51699AA2213D84820A84E409AD"
    "11248B98C0817F21A352BE199309CE20"
    "10464A4AF82731EC58C7E83382E3CEBF"
    "85F4DF94CE4B09C194568AC01372A7FC"
    "9F844D73A3CA9A615897A327FC039876"
    "231DC7610304AE56BF38840040A70EFD"
    "FF52FE036F9530F197FBC08560D68025"
    "A963BE03014E38E2F9A234FFBB3E0344"
    "780090CB88113A9465C07C6387F03CAF"
    "D625E48B380AAC7221D4F807"
)

_LOGO_OFFSET = 0x04
_DEBUG_ENABLE_OFFSET = 0x9C
_COMPLEMENT_START = 0xA0
_COMPLEMENT_END = 0xBD

_USAGE = f"""GBA ROM fixer v{VERSION}
Syntax: gbafix <rom.gba> [-p] [-t[title]] [-c<game_code>] [-m<maker_code>] [-r<version>] [-d<debug>]

parameters:
\t-p              Pad to next exact power of 2. No minimum size!
\t-t[<title>]     Patch title. Stripped filename if none given.
\t-c<game_code>   Patch game code (four characters)
\t-m<maker_code>  Patch maker code (two characters)
\t-r<version>     Patch game version (number)
\t-d<debug>       Enable debugging handler and set debug entry point (0 or 1)"""


class GbaFixError(Exception):
    """Raised when a ROM image cannot be opened or has no complete header."""


@dataclass(frozen=True)
class RomHeader:
    """The 192-byte cartridge header; the defaults form a valid header."""

    start_code: int = 0xEA00002E
    logo: bytes = LOGO
    title: bytes = bytes(12)
    game_code: int = 0
    maker_code: int = 0x3130
    fixed: int = 0x96
    unit_code: int = 0
    device_type: int = 0
    unused: bytes = bytes(7)
    game_version: int = 0
    complement_byte: int = 0
    checksum: int = 0

    def pack(self) -> bytes:
        """Return the header as the 192 bytes stored in the ROM."""
        for name, size in (("logo", len(LOGO)), ("title", 12), ("unused", 7)):
            if len(getattr(self, name)) != size:
                raise ValueError(f"{name} must be exactly {size} bytes")
        try:
            return _HEADER.pack(
                self.start_code, self.logo, self.title, self.game_code,
                self.maker_code, self.fixed, self.unit_code, self.device_type,
                self.unused, self.game_version, self.complement_byte, self.checksum,
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    def complement(self) -> int:
        """Compute the header complement check for this header."""
        return header_complement(self.pack())


def unpack_header(data: bytes) -> RomHeader:
    """Parse the header at the start of ``data``."""
    if len(data) < HEADER_SIZE:
        raise GbaFixError("Error reading header of input file!")
    return RomHeader(*_HEADER.unpack_from(data))


def header_complement(data: bytes) -> int:
    """Compute the complement check over header bytes 0xA0 to 0xBC."""
    if len(data) < _COMPLEMENT_END:
        raise ValueError("header data is too short for the complement check")
    return (-(0x19 + sum(data[_COMPLEMENT_START:_COMPLEMENT_END]))) & 0xFF


def padded_size(size: int) -> int:
    """Return ``size`` rounded up to the next power of two."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0 or size & (size - 1) == 0:
        return size
    return 1 << size.bit_length()


def title_from_path(path: str) -> str:
    """Return the file name of ``path`` without directories and last extension."""
    begin = 0
    if "\\" in path:
        begin = path.rindex("\\") + 1
    if "/" in path:
        begin = path.rindex("/") + 1
    name = path[begin:]
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def _strtoul(text: str) -> int:
    """Parse a leading unsigned number the way C's strtoul does with base 0."""
    text = text.lstrip(" \t\n\r\f\v")
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    digits = "0123456789"
    base = 10
    if text[:2].lower() == "0x" and text[2:3].lower() in "0123456789abcdef" and text[2:3]:
        base, text, digits = 16, text[2:], "0123456789abcdef"
    elif text[:1] == "0":
        base, digits = 8, "01234567"
    value = 0
    for char in text.lower():
        if char not in digits:
            break
        value = value * base + digits.index(char)
    return -value if negative else value


def _fixed_bytes(value: str, size: int) -> bytes:
    return os.fsencode(value)[:size].ljust(size, b"\0")


def fix_rom(
    path: str | os.PathLike[str], options: Iterable[str]
) -> tuple[RomHeader, list[str]]:
    """Repair the header of the ROM at ``path``, applying command-line style options.

    Arguments in ``options`` that do not start with "-" are ignored. Returns the
    header written and the messages the options produced, in order.
    """
    notes: list[str] = []
    try:
        rom = open(path, "r+b")
    except OSError as exc:
        raise GbaFixError("Error opening input file!") from exc
    with rom:
        header = unpack_header(rom.read(HEADER_SIZE))
        good = RomHeader()
        header = replace(header, logo=good.logo, fixed=good.fixed, device_type=good.device_type)

        for option in options:
            if not option.startswith("-"):
                continue
            flag, value = option[1:2], option[2:]
            if flag == "p":
                rom.seek(0, os.SEEK_END)
                size = rom.tell()
                rom.write(b"\xff" * (padded_size(size) - size))
                rom.seek(0)
            elif flag == "t":
                if value:
                    title = _fixed_bytes(value, 12)
                else:
                    stem = title_from_path(os.fsdecode(path))
                    notes.append(stem)
                    title = os.fsencode(stem)[:11].ljust(12, b"\0")
                header = replace(header, title=title)
            elif flag == "c":
                header = replace(header, game_code=int.from_bytes(_fixed_bytes(value, 4), "little"))
            elif flag == "m":
                header = replace(header, maker_code=int.from_bytes(_fixed_bytes(value, 2), "little"))
            elif flag == "v":
                pass
            elif flag == "r":
                if not value:
                    notes.append(f"Need value for {option}")
                    continue
                header = replace(header, game_version=_strtoul(value) & 0xFF)
            elif flag == "d":
                if not value:
                    notes.append(f"Need value for {option}")
                    continue
                logo = bytearray(header.logo)
                logo[_DEBUG_ENABLE_OFFSET - _LOGO_OFFSET] = 0xA5
                header = replace(
                    header, logo=bytes(logo), device_type=(_strtoul(value) & 1) << 7
                )
            else:
                notes.append(f"Invalid option: {option}")

        header = replace(header, complement_byte=0, checksum=0)
        header = replace(header, complement_byte=header.complement())
        rom.seek(0)
        rom.write(header.pack())
    return header, notes


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ROM fixer on the command line arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_USAGE)
        return 1
    filename = next((arg for arg in args if not arg.startswith("-")), None)
    if filename is None:
        print("Filename needed!")
        return 1
    try:
        _, notes = fix_rom(filename, args)
    except GbaFixError as exc:
        print(exc)
        return 1
    for note in notes:
        print(note)
    print("ROM fixed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())