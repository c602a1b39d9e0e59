from typing import List, Optional, Set

from chaintable.errors import InvalidArgument
from chaintable.hashing import HashFunction, check_index, default_hash
from chaintable.logger.log_types import LogEvent
from chaintable.logger.logger import log_error_event, log_resize_event, log_table_event

GROWTH_COEFFICIENT = 2

# A bucket is a chain of [key, value] pairs, scanned linearly
Bucket = List[list]


class HashTable:
    """Separate-chaining hash table from int keys to str values.

    The table grows by GROWTH_COEFFICIENT whenever an insert of a new key
    leaves size / capacity at or above the configured load factor. It never
    shrinks.
    """

    def __init__(
        self,
        capacity: int,
        load_factor: float,
        hash_function: Optional[HashFunction] = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            self._reject(f"hash table capacity must be greater than zero, got {capacity!r}")

        if (
            isinstance(load_factor, bool)
            or not isinstance(load_factor, (int, float))
            or not 0.0 < load_factor <= 1.0
        ):
            self._reject(f"hash table load factor must be in range (0, 1], got {load_factor!r}")

        self._load_factor = float(load_factor)
        self._hash = hash_function or default_hash
        self._num_keys = 0
        self._buckets: List[Bucket] = [[] for _ in range(capacity)]

        log_table_event(LogEvent.TABLE_CREATED, capacity, self._load_factor, 0)

    @staticmethod
    def _reject(message: str) -> None:
        log_error_event(LogEvent.INVALID_ARGUMENT, message)
        raise InvalidArgument(message)

    def _index_for(self, key: int, bucket_count: int) -> int:
        return check_index(self._hash(key, bucket_count), bucket_count)

    def bucket_index(self, key: int) -> int:
        return self._index_for(key, len(self._buckets))

    def _resize(self) -> None:
        old_capacity = len(self._buckets)
        new_capacity = old_capacity * GROWTH_COEFFICIENT
        # a tiny table with a small load factor may need more than one step
        while self._num_keys / new_capacity >= self._load_factor:
            new_capacity *= GROWTH_COEFFICIENT

        new_buckets: List[Bucket] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for key, value in bucket:
                new_buckets[self._index_for(key, new_capacity)].append([key, value])

        self._buckets = new_buckets
        log_resize_event(LogEvent.TABLE_RESIZED, old_capacity, new_capacity, self._num_keys)

    def search(self, key: int) -> Optional[str]:
        for stored_key, value in self._buckets[self.bucket_index(key)]:
            if stored_key == key:
                return value
        return None

    def contains_key(self, key: int) -> bool:
        return self.search(key) is not None

    def put(self, key: int, value: str) -> None:
        bucket = self._buckets[self.bucket_index(key)]

        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                return

        bucket.append([key, value])
        self._num_keys += 1

        if self._num_keys / len(self._buckets) >= self._load_factor:
            try:
                self._resize()
            except InvalidArgument:
                # _resize swaps buckets only on success
                bucket.pop()
                self._num_keys -= 1
                raise

    def remove(self, key: int) -> Optional[str]:
        bucket = self._buckets[self.bucket_index(key)]
        for position, (stored_key, value) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._num_keys -= 1
                return value
        return None

    def empty(self) -> bool:
        return self.size() == 0

    def size(self) -> int:
        return self._num_keys

    def capacity(self) -> int:
        return len(self._buckets)

    def load_factor(self) -> float:
        return self._load_factor

    def current_load(self) -> float:
        return self._num_keys / len(self._buckets)

    def keys(self) -> Set[int]:
        return {key for bucket in self._buckets for key, _ in bucket}

    def values(self) -> List[str]:
        """All stored values in bucket order, then chain order."""
        return [value for bucket in self._buckets for _, value in bucket]

    def bucket_sizes(self) -> List[int]:
        return [len(bucket) for bucket in self._buckets]

    def __len__(self) -> int:
        return self._num_keys

    def __contains__(self, key: int) -> bool:
        return self.contains_key(key)

    def __repr__(self) -> str:
        return (
            f"HashTable(size={self._num_keys}, capacity={len(self._buckets)}, "
            f"load_factor={self._load_factor})"
        )
