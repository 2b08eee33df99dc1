"""
Very small in-memory equality index over one field.
"""

from __future__ import annotations

from .errors import IndexConsistencyError
from .record import MISSING, Record, Scalar, _Missing, field_value, scalar_key


class FieldIndex:
    def __init__(self, field: str) -> None:
        self.field = field
        # (is_bool, value) -> records holding that value, in insertion order
        self._buckets: dict[tuple[bool, Scalar | _Missing], list[Record]] = {}

    def add(self, record: Record) -> None:
        self.insert(field_value(record, self.field), record)

    def insert(self, value: Scalar | _Missing, record: Record, count: int = 1) -> None:
        bucket = self._buckets.setdefault(scalar_key(value), [])
        bucket.extend([record] * count)

    def remove(self, value: Scalar | _Missing, record: Record) -> int:
        """
        Drop every occurrence of `record` (by identity) from the bucket for `value`.

        Returns how many occurrences were removed.
        """
        key = scalar_key(value)
        bucket = self._buckets.get(key, [])
        kept = [r for r in bucket if r is not record]
        removed = len(bucket) - len(kept)
        if removed == 0:
            raise IndexConsistencyError(
                f"record not found in index {self.field!r} under value {value!r}"
            )
        if kept:
            self._buckets[key] = kept
        else:
            del self._buckets[key]
        return removed

    def move(self, old: Scalar | _Missing, new: Scalar, record: Record) -> None:
        count = self.remove(old, record)
        self.insert(new, record, count)

    def bucket(self, value: Scalar) -> list[Record]:
        """
        Live bucket for `value`; empty list if no record holds it. Callers must not mutate it.
        """
        return self._buckets.get(scalar_key(value), [])

    def lookup(self, value: Scalar) -> list[Record]:
        return list(self.bucket(value))

    def distinct_values(self) -> int:
        return sum(1 for _, value in self._buckets if value is not MISSING)

    def size(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())
