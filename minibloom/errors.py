"""
Errors raised by the filter and its bit vector. Each one also derives from the builtin that describes the same
contract violation, so callers that only care about e.g. `ValueError` do not need to import anything from here.
"""


class BloomFilterError(Exception):
    pass


class InvalidSize(BloomFilterError, ValueError):
    pass


class IndexOutOfRange(BloomFilterError, IndexError):
    pass


class InvalidCapacity(BloomFilterError, ValueError):
    pass


class InvalidProbability(BloomFilterError, ValueError):
    pass


class DeserializationError(BloomFilterError, ValueError):
    pass


class InvalidHashCount(BloomFilterError, ValueError):
    pass
