# https://en.wikipedia.org/wiki/Bloom_filter#Probability_of_false_positives.

import logging
import struct
from io import BytesIO
from math import ceil, isnan, log
from sys import getsizeof

from minibloom.bitvector import BitVector
from minibloom.codec import INT32_MAX, read_int32, write_int32
from minibloom.errors import DeserializationError, InvalidCapacity, InvalidHashCount, InvalidProbability
from minibloom.hashing import bit_indices, encode_key

logger = logging.getLogger(__name__)

DEFAULT_FALSE_POSITIVE_PROB = 0.01

# ln(2) rounded to single precision. Filters already out there were sized with this value, and using the exact one
# would occasionally give a different number of bits or hash functions for the same (n, p).
LN2 = struct.unpack('f', struct.pack('f', log(2.0)))[0]
SQUARE_LN2 = LN2 * LN2


class BloomFilter:
    """
    Bloom filter over str or bytes keys, sized from the expected number of items and the acceptable false positive
    probability. `maybe` never gives a false negative for a key that was `put` before. There is no limit on the
    number of keys that can be put, but past `n` the false positive rate grows beyond `p`.

    Not thread-safe for writers: two concurrent `put`s may touch the same 32-bit word. Concurrent `maybe`s are fine.
    """

    def __init__(self, bits: BitVector, hashes: int):
        if not isinstance(bits, BitVector):
            raise TypeError(f'bits must be a BitVector, got {type(bits).__name__}')
        if hashes <= 0:
            raise InvalidHashCount(f'number of hash functions must be positive, got {hashes}')
        self.bits = bits
        self._hashes = hashes

    @classmethod
    def create(cls, n: int, p: float = DEFAULT_FALSE_POSITIVE_PROB):
        if n <= 0:
            raise InvalidCapacity(f'expected number of elements must be positive, got {n}')
        if isnan(p) or not 0.0 < p <= 0.5:
            raise InvalidProbability(f'false positive probability must be in (0.0, 0.5], got {p}')

        # https://stackoverflow.com/questions/658439/how-many-hash-functions-does-my-bloom-filter-need
        m = -1.0 * n * log(p) / SQUARE_LN2
        k = m / n * LN2
        if ceil(m) > INT32_MAX:
            raise InvalidCapacity(f'{n} elements at p={p} need {ceil(m)} bits, more than an int32 can address')

        logger.debug('creating bloom filter: n=%d p=%g -> %d bits, %d hash functions', n, p, ceil(m), ceil(k))
        return cls(BitVector(ceil(m)), ceil(k))

    @property
    def hashes(self) -> int:
        return self._hashes

    @property
    def size(self) -> int:
        return self.bits.size

    def _indices(self, key):
        return bit_indices(encode_key(key), self._hashes, self.bits.size)

    def put(self, key):
        for index in self._indices(key):
            self.bits.set_bit(index, True)

    def maybe(self, key) -> bool:
        for index in self._indices(key):
            if not self.bits.get_bit(index):
                return False
        return True

    def add(self, key):
        self.put(key)

    def __contains__(self, key):
        return self.maybe(key)

    def __sizeof__(self):
        return getsizeof(self.bits)

    def __repr__(self):
        return f'BloomFilter(size={self.size}, hashes={self._hashes})'

    # ser/der: the number of hash functions followed by the bit vector

    def write_to(self, fd):
        write_int32(fd, self._hashes)
        self.bits.write_to(fd)

    def serialize(self) -> bytes:
        buf = BytesIO()
        self.write_to(buf)
        return buf.getvalue()

    @classmethod
    def read_from(cls, fd):
        hashes = read_int32(fd)
        bits = BitVector.read_from(fd)
        try:
            filter = cls(bits, hashes)
        except InvalidHashCount as e:
            raise DeserializationError(str(e)) from e
        logger.debug('read bloom filter: %d bits, %d hash functions', bits.size, hashes)
        return filter

    @classmethod
    def from_bytes(cls, data: bytes):
        buf = BytesIO(data)
        filter = cls.read_from(buf)
        if buf.tell() != len(data):
            raise DeserializationError(f'{len(data) - buf.tell()} trailing bytes after bloom filter')
        return filter
