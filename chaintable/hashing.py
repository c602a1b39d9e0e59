import operator
import zlib
from typing import Callable

from chaintable.errors import InvalidArgument

# (key, bucket_count) -> index in [0, bucket_count)
HashFunction = Callable[[int, int], int]


def default_hash(key: int, bucket_count: int) -> int:
    """Map an integer key onto one of `bucket_count` buckets.

    The key's decimal text is run through crc32, so the result is the same
    in every process and for every table holding the same number of buckets.
    """
    if bucket_count <= 0:
        raise InvalidArgument(f"bucket count must be greater than zero, got {bucket_count}")
    return zlib.crc32(str(key).encode("utf-8")) % bucket_count


def check_index(index: int, bucket_count: int) -> int:
    if not isinstance(index, bool):
        try:
            position = operator.index(index)
        except TypeError:
            position = None
        if position is not None and 0 <= position < bucket_count:
            return position

    raise InvalidArgument(
        f"hash function returned {index!r}, expected an index in [0, {bucket_count})"
    )
