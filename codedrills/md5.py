"""MD5 message digest (RFC 1321) with hex helpers."""

from __future__ import annotations

import math
import os
import struct

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 16
_CHUNK_SIZE = 8192

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)

_CONSTANTS = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64))


def _rotate_left(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Fold one 64-byte block into the four-word state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for i in range(64):
        if i < 16:
            f = d ^ (b & (c ^ d))
            g = i
        elif i < 32:
            f = c ^ (d & (b ^ c))
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK))
            g = (7 * i) % 16
        f = (f + a + _CONSTANTS[i] + words[g]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotate_left(f, _SHIFTS[i])) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


class MD5:
    """Incremental MD5 hasher."""

    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        self._length += len(data)
        self._buffer.extend(data)
        full = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        for offset in range(0, full, _BLOCK_SIZE):
            self._state = _compress(self._state, bytes(self._buffer[offset:offset + _BLOCK_SIZE]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % _BLOCK_SIZE)
        tail += struct.pack("<Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + _BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        return to_hex(self.digest())

    def copy(self) -> MD5:
        clone = MD5()
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone


def digest_string(text: str) -> bytes:
    """Digest of a text, encoded as UTF-8."""
    return MD5(text.encode("utf-8")).digest()


def digest_file(path: str | os.PathLike[str]) -> bytes:
    """Digest of a file's contents; raises OSError if it cannot be read."""
    hasher = MD5()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.digest()


def to_hex(digest: bytes) -> str:
    """Render a 16-byte digest as 32 lowercase hex digits."""
    if len(digest) != _DIGEST_SIZE:
        raise ValueError(f"digest must be {_DIGEST_SIZE} bytes, got {len(digest)}")
    return digest.hex()


def from_hex(text: str) -> bytes:
    """Parse 32 hex digits back into a 16-byte digest."""
    if len(text) != 2 * _DIGEST_SIZE:
        raise ValueError(f"hex digest must be {2 * _DIGEST_SIZE} characters, got {len(text)}")
    return bytes.fromhex(text)