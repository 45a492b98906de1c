"""Type tags: explicit, enumerable stand-ins for runtime type checks.

Outputs carry an OutputVariant and generators declare a GeneratorKind.
Each tag optionally names a parent, so "is-a" compatibility is a walk up
a finite parent chain rather than introspection of Python classes.

    VARIANTS:  output
                 └── table

    KINDS:     artifact
                 ├── sql_script
                 │     ├── create_table
                 │     ├── populate_table
                 │     └── drop_table
                 └── schema_document
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class TypeTag:
    """A named tag with an optional parent tag.

    Attributes:
        name: Unique name within its table (e.g. 'sql_script').
        parent: The broader tag this one specialises, or None for a root.
    """

    name: str
    parent: TypeTag | None = None

    def lineage(self) -> Iterator[TypeTag]:
        """Yield this tag, then each ancestor up to the root."""
        tag: TypeTag | None = self
        while tag is not None:
            yield tag
            tag = tag.parent

    def is_a(self, other: TypeTag) -> bool:
        """True if this tag is `other` or specialises it."""
        return any(tag == other for tag in self.lineage())

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class OutputVariant(TypeTag):
    """The runtime variant type of an Output."""


@dataclass(frozen=True)
class GeneratorKind(TypeTag):
    """A capability identifier used to request a class of generator."""


T = TypeVar("T", bound=TypeTag)


class TagTable(Generic[T]):
    """Registry of tags of one type, looked up by name."""

    def __init__(self, tag_type: type[T]) -> None:
        self._tag_type = tag_type
        self._tags: dict[str, T] = {}

    def define(self, name: str, parent: T | str | None = None) -> T:
        """Register a tag, or return the existing one if identical.

        Raises ValueError if the name is already defined with a
        different parent, or if a parent name is unknown.
        """
        if isinstance(parent, str):
            if parent not in self._tags:
                raise ValueError(
                    f"unknown parent {parent!r} for "
                    f"{self._tag_type.__name__} {name!r}"
                )
            parent = self._tags[parent]
        tag = self._tag_type(name=name, parent=parent)
        existing = self._tags.get(name)
        if existing is not None:
            if existing != tag:
                raise ValueError(
                    f"{self._tag_type.__name__} {name!r} already defined "
                    f"with parent {existing.parent}"
                )
            return existing
        self._tags[name] = tag
        return tag

    def get(self, name: str) -> T:
        try:
            return self._tags[name]
        except KeyError:
            known = ", ".join(sorted(self._tags))
            raise KeyError(
                f"unknown {self._tag_type.__name__} {name!r} (known: {known})"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._tags

    def __iter__(self) -> Iterator[T]:
        return iter(self._tags.values())

    def __len__(self) -> int:
        return len(self._tags)


VARIANTS: TagTable[OutputVariant] = TagTable(OutputVariant)
KINDS: TagTable[GeneratorKind] = TagTable(GeneratorKind)

OUTPUT = VARIANTS.define("output")
TABLE = VARIANTS.define("table", OUTPUT)

ARTIFACT = KINDS.define("artifact")
SQL_SCRIPT = KINDS.define("sql_script", ARTIFACT)
CREATE_TABLE = KINDS.define("create_table", SQL_SCRIPT)
POPULATE_TABLE = KINDS.define("populate_table", SQL_SCRIPT)
DROP_TABLE = KINDS.define("drop_table", SQL_SCRIPT)
SCHEMA_DOCUMENT = KINDS.define("schema_document", ARTIFACT)
