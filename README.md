# bitcraft

A small collection of bit-level tools for looking at how computers store
numbers and images:

- two's complement representation of integers, and rebuilding a signed
  32-bit integer from 32 bits (`bitcraft.twos_complement`);
- fixed-width two's complement addition, subtraction, negation, Booth
  multiplication and restoring division on bit tuples (`bitcraft.bitarith`);
- IEEE 754 single-precision fields (sign, exponent, significand), both ways,
  and a report on special values (`bitcraft.floatbits`);
- float/int cast experiments in single precision (`bitcraft.floatcasts`);
- reading, describing, writing and cutting 24-bit BMP images into a grid of
  part files (`bitcraft.bmp`, `bitcraft.cutbmp`).

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### bitcraft-twos

Takes an integer followed by 32 bits, as words on the command line or, when
none are given, as whitespace-separated words on standard input. It prints the
integer's two's complement bits (8 bits when it lies in `-128..127`, 32 bits
otherwise) and then the signed integer the 32 bits encode. The bits may be
split across several words; only the first 32 characters are used.

```
bitcraft-twos -5 11111111 11111111 11111111 11111011
```

It exits with status 1 and a message on standard error if the integer is
missing, is not an integer, does not fit in 32 signed bits, or if fewer than
32 bits are given.

### bitcraft-arith

Takes two 8-bit two's complement numbers, from the command line or standard
input, and prints their sum, difference, product (16 bits, by Booth's
algorithm), quotient and remainder (restoring division; the quotient is
truncated toward zero and the remainder has the sign of the dividend).

```
bitcraft-arith 00000111 00000010
```

A number that is not exactly 8 characters of `0` and `1`, or a zero divisor,
is reported on standard error with exit status 1.

### bitcraft-float

Has three subcommands:

- `bitcraft-float dump [VALUE]` prints the sign, exponent and significand
  bits of `VALUE` rounded to single precision. Without `VALUE` it prompts
  for one.
- `bitcraft-float decode [BITS ...]` builds a single-precision float from 32
  bits; spaces between the bits are ignored, so `0 01111111 000...` works.
  Without bits it prompts for them.
- `bitcraft-float special` prints a report on 1.3E+20, the smallest positive
  float, zero, a denormal, infinity, NaN, and operations that produce
  infinities and NaNs. This is also what runs when no subcommand is given.

```
bitcraft-float dump 1.0
bitcraft-float decode 0 00000000 00000000000000000000001
bitcraft-float
```

### bitcraft-casts

Prints a set of checks on conversions between ints and single-precision
floats: whether values survive a round trip, and whether float addition is
associative for `1`, `1e10` and `-1e10`.

### cutbmp

Splits a BMP file into parts:

```
cutbmp picture.bmp -h 2 -w 3
```

`-h` gives the number of rows of parts and `-w` the number of columns, both 1
by default. Note that `-h` is the row count, not help. The parts are written
next to the source as `picture.part01.bmp`, `picture.part02.bmp` and so on,
row by row from the top; the last row and column of parts take whatever the
even division leaves over. On success it prints `Split file successfully!`;
a missing file, a truncated bitmap or a grid larger than the image is
reported on standard error with exit status 1.

## Library use

```python
from bitcraft.twos_complement import two_complement_bits, integer_from_bits
from bitcraft.bitarith import parse_bits, format_bits, booth_multiply, divide_bits
from bitcraft.floatbits import float_fields, bits_to_float, dump_float
from bitcraft.bmp import read_bmp, split_bmp, cut_bmp_file, part_file_name

two_complement_bits(-5)                 # '11111011'
integer_from_bits("1" * 32)             # -1
q, r = divide_bits(parse_bits("00000111"), parse_bits("00000010"))
format_bits(q), format_bits(r)          # ('00000011', '00000001')
str(float_fields(1.0))                  # '0 01111111 00000000000000000000000'
bits_to_float("0 00000000 00000000000000000000001")

with open("picture.bmp", "rb") as stream:
    image = read_bmp(stream)
image.info()                             # header description lines
parts = split_bmp(image, 2, 3)           # six BmpImage objects
part_file_name("picture.bmp", 1)         # 'picture.part01.bmp'
cut_bmp_file("picture.bmp", 2, 3)        # writes the part files, returns names
```

`BmpImage` holds a `BmpHeader`, a `DibHeader` and its rows of `Pixel`
values, top row first; `padding()`, `pixel_lines()` and `write(stream)` give
the row padding, one description line per pixel, and the stored file.

Malformed bit strings, wrong lengths, out-of-range integers, truncated
bitmaps and grids larger than the image raise `ValueError`; dividing by zero
raises `ZeroDivisionError`.

## Limitations

- The BMP reader handles uncompressed 24-bit images whose pixel array follows
  the two headers directly; it does not honour the pixel array offset, colour
  tables, other colour depths or compression.
- Part files keep the source's file header unchanged (including its file
  size field); only the DIB header's width, height and pixel array size are
  updated.
- `bitcraft.bitarith` commands work on 8-bit numbers only, though the
  functions accept any equal widths.