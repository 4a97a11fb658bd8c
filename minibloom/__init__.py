from minibloom.bitvector import BitVector
from minibloom.bloom import BloomFilter, DEFAULT_FALSE_POSITIVE_PROB
from minibloom.errors import (BloomFilterError, DeserializationError, IndexOutOfRange, InvalidCapacity,
                              InvalidHashCount, InvalidProbability, InvalidSize)
