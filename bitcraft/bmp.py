"""Reading, describing, writing and splitting 24-bit BMP images."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import astuple, dataclass, replace
from typing import BinaryIO

PIXEL_SIZE = 3
PADDING_BYTE = b"0"

_HEADER = struct.Struct("<2sIHHI")
_DIB = struct.Struct("<IIIHHIIIIII")
_PIXEL = struct.Struct("<3B")


@dataclass(frozen=True)
class BmpHeader:
    """The file header: signature, size and pixel array offset."""

    signature: bytes = b"BM"
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    pixel_array_offset: int = _HEADER.size + _DIB.size


@dataclass(frozen=True)
class DibHeader:
    """The BITMAPINFOHEADER describing the image."""

    size: int = _DIB.size
    width: int = 0
    height: int = 0
    color_planes: int = 1
    color_depth: int = 24
    compression: int = 0
    pixel_array_size: int = 0
    horizontal_resolution: int = 0
    vertical_resolution: int = 0
    colors: int = 0
    important_colors: int = 0


@dataclass(frozen=True)
class Pixel:
    """One pixel, stored in blue, green, red order."""

    b: int
    g: int
    r: int

    def __bytes__(self) -> bytes:
        return _PIXEL.pack(self.b, self.g, self.r)


def _row_padding(width: int, color_depth: int) -> int:
    return (4 - (width * (color_depth // 8)) % 4) % 4


@dataclass(frozen=True)
class BmpImage:
    """A bitmap whose pixel rows are held top row first."""

    header: BmpHeader
    dib: DibHeader
    pixels: tuple[tuple[Pixel, ...], ...]

    def padding(self) -> int:
        """Number of bytes that pad each stored row to a multiple of four."""
        return _row_padding(self.dib.width, self.dib.color_depth)

    def info(self) -> list[str]:
        """Lines describing the file header and the DIB header."""
        header, dib = self.header, self.dib
        return [
            "---HEADER---",
            f"Signature              : {header.signature.decode('latin-1')}",
            f"File size              : {header.file_size}",
            f"Reserved 1             : {header.reserved1}",
            f"Reserved 2             : {header.reserved2}",
            f"Pixel Array byte offset: {header.pixel_array_offset}",
            "",
            "---DIB Format---",
            f"DIB size                                 : {dib.size}",
            f"Image width                              : {dib.width}",
            f"Image height                             : {dib.height}",
            f"Color planes                             : {dib.color_planes}",
            f"Color depth                              : {dib.color_depth}",
            f"Compression algorithm                    : {dib.compression}",
            f"Pixel Array size                         : {dib.pixel_array_size}",
            f"Horizontal resolution                    : {dib.horizontal_resolution}",
            f"Vertical resolution                      : {dib.vertical_resolution}",
            f"Number of colors in Color Table          : {dib.colors}",
            f"Number of important colors in Color Table: {dib.important_colors}",
            "",
        ]

    def pixel_lines(self) -> Iterator[str]:
        """Yield one line per pixel, row by row from the top."""
        for i, row in enumerate(self.pixels):
            for j, p in enumerate(row):
                yield f"Pixel at ({i}, {j}): R={p.r}, G={p.g}, B={p.b}"

    def write(self, stream: BinaryIO) -> None:
        """Write the headers and the pixel rows, bottom row first."""
        stream.write(_HEADER.pack(*astuple(self.header)))
        stream.write(_DIB.pack(*astuple(self.dib)))
        pad = PADDING_BYTE * self.padding()
        for row in reversed(self.pixels):
            stream.write(b"".join(bytes(p) for p in row) + pad)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(f"truncated bitmap: missing {what}")
    return data


def read_bmp(stream: BinaryIO) -> BmpImage:
    """Read a bitmap whose pixel array follows the headers directly."""
    header = BmpHeader(*_HEADER.unpack(_read_exact(stream, _HEADER.size, "file header")))
    dib = DibHeader(*_DIB.unpack(_read_exact(stream, _DIB.size, "DIB header")))
    padding = _row_padding(dib.width, dib.color_depth)
    row_size = dib.width * PIXEL_SIZE
    stored = []
    for _ in range(dib.height):
        data = _read_exact(stream, row_size, "pixel data")
        stored.append(tuple(Pixel(*values) for values in _PIXEL.iter_unpack(data)))
        stream.read(padding)
    return BmpImage(header, dib, tuple(reversed(stored)))


def part_file_name(source: str, index: int) -> str:
    """Name of the ``index``-th part: the extension becomes ``.partNN.bmp``."""
    slash = source.rfind("/")
    dot = source.rfind(".")
    stem = source[:dot] if dot > slash else source
    return f"{stem}.part{index:02d}.bmp"


def split_bmp(image: BmpImage, rows: int, columns: int) -> list[BmpImage]:
    """Cut ``image`` into ``rows`` by ``columns`` parts, row by row from the top.

    The last row and the last column of parts take up what the even
    division leaves over.
    """
    width, height = image.dib.width, image.dib.height
    if rows < 1 or columns < 1:
        raise ValueError("the number of parts must be positive")
    if rows > height:
        raise ValueError("y is greater than the height of the image")
    if columns > width:
        raise ValueError("x is greater than the width of the image")

    part_height, part_width = height // rows, width // columns
    last_height = height - (rows - 1) * part_height
    last_width = width - (columns - 1) * part_width

    parts = []
    for i in range(rows):
        h = last_height if i == rows - 1 else part_height
        band = image.pixels[i * part_height : i * part_height + h]
        for j in range(columns):
            w = last_width if j == columns - 1 else part_width
            left = j * part_width
            pixels = tuple(row[left : left + w] for row in band)
            padding = _row_padding(w, image.dib.color_depth)
            dib = replace(
                image.dib,
                width=w,
                height=h,
                pixel_array_size=h * (w * PIXEL_SIZE + padding),
            )
            parts.append(BmpImage(image.header, dib, pixels))
    return parts


def cut_bmp_file(path: str, rows: int, columns: int) -> list[str]:
    """Split the bitmap at ``path`` into part files; return their names."""
    source = str(path)
    with open(source, "rb") as stream:
        image = read_bmp(stream)
    written = []
    for index, part in enumerate(split_bmp(image, rows, columns), start=1):
        name = part_file_name(source, index)
        with open(name, "wb") as out:
            part.write(out)
        written.append(name)
    return written