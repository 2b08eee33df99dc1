"""
Record validation and the scalar comparison rules shared by indexes and queries.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, MutableMapping

from .errors import RecordValidationError

Scalar = str | int | float | bool | None
Record = MutableMapping[str, Scalar]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


# Stands in for a field a record does not have. Never equal to a stored value.
MISSING = _Missing()


def validate_record(record: object, kind: str = "record") -> None:
    """
    Check that `record` can be indexed: a mutable mapping of string keys to hashable values.
    """
    if not isinstance(record, MutableMapping):
        raise RecordValidationError(f"{kind} must be a mutable mapping, got {type(record).__name__}")
    validate_fields(record, kind)


def validate_fields(fields: Mapping[object, object], kind: str = "example") -> None:
    for key, value in fields.items():
        if not isinstance(key, str):
            raise RecordValidationError(f"{kind} keys must be strings, got {key!r}")
        if not isinstance(value, Hashable):
            raise RecordValidationError(f"{kind} field {key!r} has unhashable value {value!r}")


def field_value(record: Mapping[str, Scalar], field: str) -> Scalar | _Missing:
    return record.get(field, MISSING)


def scalar_key(value: Scalar | _Missing) -> tuple[bool, Scalar | _Missing]:
    """
    Bucket key for a value. Booleans are tagged so True and 1 land in different buckets.
    """
    return (isinstance(value, bool), value)


def scalars_equal(a: Scalar | _Missing, b: Scalar | _Missing) -> bool:
    return isinstance(a, bool) == isinstance(b, bool) and a == b
