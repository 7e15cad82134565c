"""Dialect type tables and the registry that holds them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union

from ..types.base import AbstractType
from ..utils.exceptions import (
    AmbiguousTypeError,
    UnknownDialectError,
    UnknownTypeError,
    UnsupportedTypeError,
)

Aliases = Union[Tuple[str, ...], bool]

_PARAMS = re.compile(r"\s*\([^)]*\)")
_SPACES = re.compile(r"\s+")


def normalize_type_name(native: str) -> str:
    """Upper-case a native type name and strip its parameters.

    ``"varchar(255)"`` becomes ``"VARCHAR"`` and ``"VARCHAR BINARY(10)"``
    becomes ``"VARCHAR BINARY"``.
    """
    stripped = _PARAMS.sub("", native or "")
    return _SPACES.sub(" ", stripped).strip().upper()


@dataclass(frozen=True)
class DialectTypeEntry:
    """Dialect metadata attached to one abstract type key.

    ``aliases`` is either a non-empty tuple of native type names used when
    reading a schema, or ``False`` when the dialect cannot express the type.
    """

    key: str
    type_class: Type[AbstractType]
    aliases: Aliases
    render: Callable[[AbstractType], str]
    parse: Optional[Callable[..., Any]]
    extend: Callable[[AbstractType], AbstractType]

    @classmethod
    def for_class(cls, type_class: Type[AbstractType], aliases: Any) -> "DialectTypeEntry":
        if not type_class.key:
            raise ValueError(f"{type_class.__name__} must define a non-empty key")
        if aliases is False or aliases is None:
            normalized: Aliases = False
        else:
            normalized = tuple(aliases)
            if not normalized:
                raise ValueError(f"{type_class.key} aliases must be non-empty or False")
        return cls(
            key=type_class.key,
            type_class=type_class,
            aliases=normalized,
            render=type_class.to_sql,
            parse=type_class.parse,
            extend=type_class.extend,
        )

    @property
    def supported(self) -> bool:
        return self.aliases is not False


@dataclass(frozen=True)
class DialectTypeTable:
    """Read-only mapping from abstract type key to :class:`DialectTypeEntry`."""

    name: str
    entries: Mapping[str, DialectTypeEntry]
    docs_url: str = ""
    _reverse: Mapping[str, Tuple[str, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        entries = MappingProxyType(dict(self.entries))
        reverse: Dict[str, Tuple[str, ...]] = {}
        for entry in entries.values():
            if not entry.supported:
                continue
            for alias in entry.aliases:  # type: ignore[union-attr]
                native = normalize_type_name(alias)
                reverse[native] = reverse.get(native, ()) + (entry.key,)
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_reverse", MappingProxyType(reverse))

    def entry(self, key: str) -> DialectTypeEntry:
        try:
            return self.entries[key]
        except KeyError as exc:
            raise UnknownTypeError(
                f"Unknown type key '{key}' for dialect '{self.name}'",
                context={"available": ", ".join(sorted(self.entries))},
            ) from exc

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def create(self, key: str, *args: Any, **kwargs: Any) -> AbstractType:
        """Construct the dialect's class for ``key``."""
        return self.entry(key).type_class(*args, **kwargs)

    def adapt(self, data_type: AbstractType) -> AbstractType:
        """Return ``data_type`` as an instance of this dialect's class for its key."""
        entry = self.entry(data_type.key)
        if isinstance(data_type, entry.type_class):
            return data_type
        return entry.extend(data_type)

    def render(self, data_type: AbstractType) -> str:
        """Render the column-type clause for ``data_type``."""
        # Subclasses of the registered class keep their own rendering
        return self.adapt(data_type).to_sql()

    def parse(self, key: str, value: Any, options: Optional[Dict[str, Any]] = None) -> Any:
        """Convert a raw driver value using the parser registered for ``key``.

        ``None`` and types without a parser pass through unchanged.
        """
        parser = self.entry(key).parse
        if parser is None or value is None:
            return value
        return parser(value, options or {})

    def is_supported(self, key: str) -> bool:
        return self.entry(key).supported

    def keys_for(self, native: str) -> Tuple[str, ...]:
        """Every abstract type key the native type name identifies, in table order."""
        return self._reverse.get(normalize_type_name(native), ())

    def resolve(self, native: str, expected: Optional[str] = None) -> str:
        """Map a native type name back to a single abstract type key.

        A name shared by several types (``TINYINT`` is both ``TINYINT`` and
        ``BOOLEAN``) only resolves when the caller says which one it expects.
        """
        if expected is not None and not self.is_supported(expected):
            raise UnsupportedTypeError(
                f"{self.name} cannot represent {expected} natively",
                context={"native": native},
            )
        candidates = self.keys_for(native)
        if not candidates:
            raise UnknownTypeError(
                f"Native type '{native}' is not known to dialect '{self.name}'"
            )
        if expected is not None:
            if expected in candidates:
                return expected
            raise UnknownTypeError(
                f"Native type '{native}' does not map to {expected}",
                context={"candidates": ", ".join(candidates)},
            )
        if len(candidates) > 1:
            raise AmbiguousTypeError(
                f"Native type '{native}' maps to several types: {', '.join(candidates)}",
                context={"dialect": self.name},
            )
        return candidates[0]


_REGISTRY: Dict[str, DialectTypeTable] = {}


def register(table: DialectTypeTable) -> DialectTypeTable:
    name = getattr(table, "name", None)
    if not name or not isinstance(name, str):
        raise ValueError("Dialect type table must define a non-empty .name")
    _REGISTRY[name.lower()] = table
    return table


def get_dialect_types(name: str) -> DialectTypeTable:
    k = (name or "").lower()
    # Driver variants such as "sqlite+pysqlite" share the base table
    k = k.split("+", 1)[0]
    if k not in _REGISTRY:
        available_names = ", ".join(sorted(_REGISTRY.keys()))
        raise UnknownDialectError(f"Unknown dialect '{name}'. Available: {available_names}")
    return _REGISTRY[k]


def available() -> Dict[str, DialectTypeTable]:
    return dict(_REGISTRY)
