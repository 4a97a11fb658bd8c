"""
Fixed-layout binary helpers: every integer on the wire is a big-endian (network order) int32.
"""

import struct

from minibloom.errors import DeserializationError

INT32 = struct.Struct('>i')
INT32_MAX = 2 ** 31 - 1


def write_int32(fd, value: int):
    fd.write(INT32.pack(value))


def read_int32(fd) -> int:
    data = fd.read(INT32.size)
    if len(data) != INT32.size:
        raise DeserializationError(f'unexpected end of input, wanted {INT32.size} bytes, got {len(data)}')
    return INT32.unpack(data)[0]


def write_words(fd, raw: bytes):
    # raw holds little-endian 32-bit words, the wire wants them big-endian
    n = len(raw) // 4
    fd.write(struct.pack(f'>{n}I', *struct.unpack(f'<{n}I', raw)))


def read_words(fd, n: int) -> bytes:
    data = fd.read(4 * n)
    if len(data) != 4 * n:
        raise DeserializationError(f'unexpected end of input, wanted {n} words, got {len(data)} bytes')
    return struct.pack(f'<{n}I', *struct.unpack(f'>{n}I', data))
