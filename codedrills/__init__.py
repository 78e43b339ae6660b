"""Small classic algorithms: matrices, linear solving, least squares, MD5, palindromes, pi and idioms."""

__version__ = "0.1.0"