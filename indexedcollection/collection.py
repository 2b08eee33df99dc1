"""
In-memory record collection with per-field equality indexes and query by example.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .config import IndexConfig
from .index import FieldIndex
from .record import MISSING, Record, Scalar, field_value, scalars_equal, validate_fields, validate_record

logger = logging.getLogger(__name__)


class IndexedCollection:
    """
    Ordered collection of records with equality indexes on some or all fields.

    Pass `index_fields` to index a fixed set of fields, or omit it to index
    every field the collection sees. Records are stored by reference: change
    them only through `update` or the indexes go stale.
    """

    def __init__(self, index_fields: Iterable[str] | None = None) -> None:
        self.config = IndexConfig.from_fields(index_fields)
        self.items: list[Record] = []
        self._indexes: dict[str, FieldIndex] = {
            field: FieldIndex(field) for field in self.config.fields
        }

    @classmethod
    def from_config(cls, config: IndexConfig) -> "IndexedCollection":
        return cls(None if config.autoindex else config.fields)

    def add(self, record: Record) -> None:
        """
        Index and append a single record.
        """
        validate_record(record)
        if self.config.autoindex:
            for field in record:
                self._index_for(field).add(record)
        else:
            for index in self._indexes.values():
                index.add(record)
        self.items.append(record)

    def add_many(self, records: Iterable[Record]) -> None:
        for record in records:
            self.add(record)

    def get(self, field: str, value: Scalar) -> list[Record]:
        """
        Return every record whose `field` equals `value`, in insertion order.
        """
        index = self._indexes.get(field)
        if index is not None:
            return index.lookup(value)
        return [record for record in self.items if scalars_equal(field_value(record, field), value)]

    def qbe(self, example: Mapping[str, Scalar] | None = None) -> list[Record]:
        """
        Query by example: return the records matching every field of `example`.

        The indexed field with the smallest bucket drives the scan and the
        remaining fields are checked against each of its records. An empty
        bucket on any indexed field ends the query early. Without any indexed
        field in the example every record is checked.
        """
        if not example:
            return list(self.items)
        validate_fields(example)

        driver: str | None = None
        candidates: list[Record] = self.items
        for field, value in example.items():
            index = self._indexes.get(field)
            if index is None:
                continue
            bucket = index.bucket(value)
            if not bucket:
                logger.debug("qbe: no record has %s=%r", field, value)
                return []
            # Strict comparison keeps the earliest field on ties.
            if driver is None or len(bucket) < len(candidates):
                driver, candidates = field, bucket

        if driver is not None and len(example) == 1:
            return list(candidates)

        logger.debug("qbe: scanning %d candidates from %s", len(candidates), driver or "all items")
        checks = [(field, value) for field, value in example.items() if field != driver]
        return [
            record
            for record in candidates
            if all(scalars_equal(field_value(record, field), value) for field, value in checks)
        ]

    def find_one(self, example: Mapping[str, Scalar] | None = None) -> Record | None:
        """
        Convenience wrapper that returns the first matching record or None.
        """
        results = self.qbe(example)
        return results[0] if results else None

    def update(self, query: Mapping[str, Scalar] | None, patch: Mapping[str, Scalar]) -> None:
        """
        Apply `patch` to every record matching `query`, keeping the indexes in step.

        Fields whose value is already the patched one are left alone.
        """
        validate_fields(patch, "patch")
        matches = self.qbe(query)
        logger.debug("update: %d records match %r", len(matches), query)

        changed = 0
        for record in matches:
            for field, new in patch.items():
                old = field_value(record, field)
                if scalars_equal(old, new):
                    continue

                index = self._indexes.get(field)
                if index is not None:
                    if old is MISSING and self.config.autoindex:
                        # Autoindexing only files records under fields they have.
                        index.insert(new, record, self._occurrences(record))
                    else:
                        index.move(old, new, record)
                elif self.config.autoindex:
                    self._index_for(field).insert(new, record, self._occurrences(record))

                # Relocate under the old value first, then assign.
                record[field] = new
                changed += 1

        logger.debug("update: changed %d fields", changed)

    # --- introspection ---------------------------------------------------

    @property
    def indexed_fields(self) -> tuple[str, ...]:
        return tuple(self._indexes)

    def is_indexed(self, field: str) -> bool:
        return field in self._indexes

    def stats(self) -> dict[str, dict[str, int]]:
        return {
            field: {
                "distinct_values": index.distinct_values(),
                "total_records_indexed": index.size(),
            }
            for field, index in self._indexes.items()
        }

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.items)

    # --- internal helpers ------------------------------------------------

    def _index_for(self, field: str) -> FieldIndex:
        index = self._indexes.get(field)
        if index is None:
            logger.debug("autoindex: indexing new field %r", field)
            index = self._indexes[field] = FieldIndex(field)
        return index

    def _occurrences(self, record: Record) -> int:
        return sum(1 for item in self.items if item is record)
