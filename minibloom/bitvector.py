"""
Fixed-size packed bit vector. Storage is a run of 32-bit words, bit `i` living at position `i % 32` (LSB first) of
word `i // 32`. The words are kept in a little-endian bitarray, which lays out exactly those words in little-endian
byte order, so bitarray index `i` is the bit we want without any address arithmetic on our side.
"""

from io import BytesIO
from sys import getsizeof

from bitarray import bitarray

from minibloom.codec import INT32_MAX, read_int32, read_words, write_int32, write_words
from minibloom.errors import DeserializationError, IndexOutOfRange, InvalidSize

WORD_BITS = 32


def words_needed(size: int) -> int:
    return (size + WORD_BITS - 1) // WORD_BITS


class BitVector:

    def __init__(self, size: int):
        if size <= 0:
            raise InvalidSize(f'size must be positive, got {size}')
        if size > INT32_MAX:
            raise InvalidSize(f'size must fit in an int32, got {size}')
        self._size = size
        self.bits = bitarray(words_needed(size) * WORD_BITS, endian='little')
        self.bits.setall(False)

    @property
    def size(self) -> int:
        """The number of addressable bits, as requested at construction."""
        return self._size

    @property
    def byte_size(self) -> int:
        """The number of bytes the packed words occupy, always a multiple of 4."""
        return len(self.bits) // 8

    def _check(self, index: int):
        if not 0 <= index < self._size:
            raise IndexOutOfRange(f'bit index {index} out of range [0, {self._size})')

    def get_bit(self, index: int) -> bool:
        self._check(index)
        return bool(self.bits[index])

    def set_bit(self, index: int, value: bool):
        self._check(index)
        self.bits[index] = bool(value)

    def count(self) -> int:
        # padding bits are excluded, they may be set if they came in through from_bytes
        return self.bits.count(1, 0, self._size)

    def __getitem__(self, index):
        return self.get_bit(index)

    def __setitem__(self, index, value):
        self.set_bit(index, value)

    def __len__(self):
        return self._size

    def __sizeof__(self):
        return getsizeof(self.bits)

    def __repr__(self):
        return f'BitVector(size={self._size})'

    # ser/der: size in bits, number of words, then every word, all as big-endian int32

    def write_to(self, fd):
        write_int32(fd, self._size)
        write_int32(fd, len(self.bits) // WORD_BITS)
        write_words(fd, self.bits.tobytes())

    def serialize(self) -> bytes:
        buf = BytesIO()
        self.write_to(buf)
        return buf.getvalue()

    @classmethod
    def read_from(cls, fd):
        size = read_int32(fd)
        if size <= 0:
            raise DeserializationError(f'bit vector size must be positive, got {size}')
        n_words = read_int32(fd)
        if n_words != words_needed(size):
            raise DeserializationError(f'{size} bits need {words_needed(size)} words, input declares {n_words}')

        vec = cls(size)
        vec.bits = bitarray(endian='little')
        vec.bits.frombytes(read_words(fd, n_words))
        return vec

    @classmethod
    def from_bytes(cls, data: bytes):
        buf = BytesIO(data)
        vec = cls.read_from(buf)
        if buf.tell() != len(data):
            raise DeserializationError(f'{len(data) - buf.tell()} trailing bytes after bit vector')
        return vec
