"""Output models: what factories produce and generators render."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from aggoutput.models.tags import TABLE, OutputVariant

# Opaque collaborators, passed through untouched.
Schema = Any
Aggregate = Any


class Output(Protocol):
    """Anything with a variant tag can be rendered by a generator."""

    @property
    def variant(self) -> OutputVariant:
        ...


@dataclass
class TableOutput:
    """An aggregate materialised as a database table.

    Attributes:
        aggregate: The aggregate this table stores.
        table_name: Name of the table to create (e.g. 'agg_sales_by_month').
        catalog_name: Optional catalog qualifier.
        schema_name: Optional database schema qualifier.
    """

    aggregate: Aggregate
    table_name: str
    catalog_name: str | None = None
    schema_name: str | None = None
    variant: OutputVariant = field(default=TABLE, init=False)

    @property
    def qualified_name(self) -> str:
        parts = [self.catalog_name, self.schema_name, self.table_name]
        return ".".join(p for p in parts if p)

    def __str__(self) -> str:
        return f"TableOutput({self.qualified_name})"
