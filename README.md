# codedrills

A collection of small, self-contained algorithms as a plain Python package
with no third-party dependencies:

- `codedrills.matrix`: a dense `Matrix` with `transpose`, `add`, `minus`,
  `multiply` and `is_vector`; mismatched shapes raise `MatrixShapeError`
- `codedrills.cholesky`: `upper_factor` and `solve_augmented`, which solve a
  symmetric positive-definite system given as an augmented matrix `[A | b]`
  without taking square roots
- `codedrills.lspa`: `fit_polynomial`, least-squares polynomial fitting of
  discrete data (degree 2 by default)
- `codedrills.md5`: an incremental `MD5` hasher, plus `digest_string`,
  `digest_file`, `to_hex` and `from_hex`
- `codedrills.rotate`: `rotate`, which swaps each character with the one
  `m` places ahead, left to right
- `codedrills.fastlog`: `fast_log2` and `fast_log`, approximate logarithms
  computed in single precision from a float's bits
- `codedrills.palindrome`: `parse_int`, `reverse_digits`, `is_palindrome`,
  `longest_palindrome` (Manacher's algorithm) and `highlight_longest`
- `codedrills.pi`: `liuhui`, Liu Hui's polygon-doubling estimates of pi
- `codedrills.idiom`: `load_dictionary` and `next_idiom` for chaining
  four-character idioms

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from codedrills.matrix import Matrix
from codedrills.md5 import MD5, digest_string, to_hex
from codedrills.rotate import rotate
from codedrills.palindrome import is_palindrome, reverse_digits, longest_palindrome

m = Matrix.from_rows([[1, 0, 2], [-1, 3, 1]])
n = Matrix.from_rows([[3, 1], [2, 1], [1, 0]])
print(m.multiply(n).to_rows())      # [[5.0, 1.0], [4.0, 2.0]]
print(m.transpose().to_rows())

print(MD5(b"").hexdigest())          # d41d8cd98f00b204e9800998ecf8427e
print(to_hex(digest_string("")))

print(rotate("abcdefghi", 3))        # defghiabc
print(reverse_digits(123))           # 321
print(is_palindrome(616))            # True
print(longest_palindrome("forgeeksskeegfor"))  # geeksskeeg
```

Solving a linear system and fitting a curve:

```python
from codedrills.cholesky import solve_augmented
from codedrills.lspa import fit_polynomial

roots = solve_augmented([
    [5, 10, 30, 8],
    [10, 30, 100, 20],
    [30, 100, 354, 70],
])

coefficients = fit_polynomial([1, 2, 3, 4], [4.0, 6.4, 8.0, 8.8], 2)
```

Chaining idioms:

```python
import random
from codedrills.idiom import load_dictionary, next_idiom

dictionary = load_dictionary(["习以为常", "学而不厌"])
print(next_idiom("好好学习", dictionary, random.Random(0)))  # 习以为常
```

## Commands

Installing the package provides these commands:

```
codedrills-palindrome [NUMBER]        # parse, reverse and palindrome-check a number (default 616)
codedrills-palindrome --text FILE     # highlight the longest palindrome in the first word of FILE
codedrills-pi                         # Liu Hui's approximations of pi
codedrills-idiom WORD [DICTIONARY]    # pick an idiom that starts with WORD's fourth character
```

`codedrills-idiom` reads its dictionary from `dict.txt` in the current
directory unless another file is given.

## What it does not do

MD5 hashing is offered as a library only: there is no command for hashing
files or walking a directory tree, so use `digest_file` from your own code.
The package has no linked-list data structure.