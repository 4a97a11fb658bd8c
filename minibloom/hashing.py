"""
Derives the bit indices of a key. Every hash slot runs a fresh SipHash-2-4 (keyed with a fixed 16 byte key) over
the key bytes followed by a 4-byte little-endian suffix of `slot * 3`. The suffix multiplier and the key are part of
the on-disk contract: filters written elsewhere can only be queried here if both stay exactly as they are.
"""

import struct

from siphash24 import siphash24

SIP_KEY = b'cliqz2016stefano'
SLOT_MULTIPLIER = 3

# keep the low 31 bits, i.e. drop the sign of the int32 the index used to be computed in
INDEX_MASK = 0x7fffffff


def encode_key(key) -> bytes:
    if isinstance(key, str):
        return key.encode('utf-8')
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f'keys must be str or bytes, got {type(key).__name__}')


def slot_suffix(slot: int) -> bytes:
    return struct.pack('<I', (slot * SLOT_MULTIPLIER) & 0xffffffff)


def keyed_hash(data: bytes, suffix: bytes) -> int:
    h = siphash24(data, key=SIP_KEY)
    h.update(suffix)
    return int.from_bytes(h.digest(), byteorder='little')


def bit_indices(data: bytes, hashes: int, size: int) -> list[int]:
    return [(keyed_hash(data, slot_suffix(i)) & INDEX_MASK) % size for i in range(hashes)]
