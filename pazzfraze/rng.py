# ChaChaRng
# (deterministic random numbers seeded from the derived digest)
#

import struct

from .backend import ChaCha20

SEED_SIZE = 32
BUFFER_BLOCKS = 4  # keystream blocks fetched at once

_U64_MASK = (1 << 64) - 1


class ChaChaRng:

    """Reproducible generator over the ChaCha20 keystream.

    Key is the 32-byte seed, nonce and block counter start at zero.
    Integers are read from the keystream in little-endian order,
    so the same seed always gives the same sequence.

    """

    def __init__(self, seed: bytes):
        if len(seed) != SEED_SIZE:
            raise ValueError(f"seed must be {SEED_SIZE} bytes, got {len(seed)}")
        self._stream = ChaCha20(seed)
        self._buffer = b''
        self._pos = 0

    def fill_bytes(self, size: int) -> bytes:
        """Return next `size` bytes of the stream."""
        if self._pos + size > len(self._buffer):
            refill = max(size, BUFFER_BLOCKS * ChaCha20.BLOCK_SIZE)
            self._buffer = self._buffer[self._pos:] + self._stream.keystream(refill)
            self._pos = 0
        out = self._buffer[self._pos:self._pos + size]
        self._pos += size
        return out

    def next_u32(self) -> int:
        return struct.unpack('<L', self.fill_bytes(4))[0]

    def next_u64(self) -> int:
        return struct.unpack('<Q', self.fill_bytes(8))[0]

    def gen_range(self, low: int, high: int) -> int:
        """Uniformly distributed integer in ``[low, high)``.

        Widening multiply of a 64-bit draw by the range size, rejecting
        draws whose low half falls outside the zone.

        """
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        span = high - low
        if span > _U64_MASK:
            raise ValueError("range does not fit in 64 bits")
        zone = ((span << (64 - span.bit_length())) - 1) & _U64_MASK
        while True:
            m = self.next_u64() * span
            if (m & _U64_MASK) <= zone:
                return low + (m >> 64)
