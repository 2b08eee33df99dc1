"""
Index configuration: a fixed list of fields, or autoindexing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .errors import ConfigurationError


class IndexMode(Enum):
    EXPLICIT = "explicit"
    AUTO = "auto"


@dataclass(frozen=True, slots=True)
class IndexConfig:
    mode: IndexMode
    fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.mode is IndexMode.EXPLICIT and not self.fields:
            raise ConfigurationError("explicit index configuration needs at least one field")
        if self.mode is IndexMode.AUTO and self.fields:
            raise ConfigurationError("autoindex configuration takes no fields")

    @classmethod
    def auto(cls) -> "IndexConfig":
        return cls(mode=IndexMode.AUTO)

    @classmethod
    def explicit(cls, fields: Iterable[str]) -> "IndexConfig":
        if isinstance(fields, (str, bytes)):
            raise ConfigurationError("index fields must be a sequence of names, not a string")

        names: list[str] = []
        for field in fields:
            if not isinstance(field, str):
                raise ConfigurationError(f"index field names must be strings, got {field!r}")
            if field not in names:
                names.append(field)
        return cls(mode=IndexMode.EXPLICIT, fields=tuple(names))

    @classmethod
    def from_fields(cls, fields: Iterable[str] | None) -> "IndexConfig":
        """
        Map the `index_fields` constructor argument to a config.

        `None` means the caller omitted it and selects autoindexing; any
        iterable, including an empty one, is taken as an explicit list.
        """
        if fields is None:
            return cls.auto()
        return cls.explicit(fields)

    @property
    def autoindex(self) -> bool:
        return self.mode is IndexMode.AUTO
