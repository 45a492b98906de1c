"""Factory producing one database table per aggregate."""

from __future__ import annotations

import re

from aggoutput.models.output import Aggregate, Schema, TableOutput
from aggoutput.models.tags import TABLE

_UNSAFE_CHARS = re.compile(r"[^a-z0-9_]")


def table_name_for(aggregate: Aggregate, prefix: str = "agg_") -> str:
    """Derive a table name from an aggregate.

    Uses the aggregate's `name` attribute if it has one, otherwise its
    string form. 'Sales By Month' with prefix 'agg_' → 'agg_sales_by_month'.
    """
    name = getattr(aggregate, "name", None) or str(aggregate)
    return prefix + _UNSAFE_CHARS.sub("_", name.strip().lower())


class TableOutputFactory:
    """Creates TableOutputs whenever a schema is bound."""

    output_variant = TABLE

    def __init__(
        self,
        table_prefix: str = "agg_",
        catalog_name: str | None = None,
        schema_name: str | None = None,
    ) -> None:
        self.table_prefix = table_prefix
        self.catalog_name = catalog_name
        self.schema_name = schema_name

    def can_create_output(self, schema: Schema) -> bool:
        return schema is not None

    def create_output(self, schema: Schema, aggregate: Aggregate) -> TableOutput:
        return TableOutput(
            aggregate=aggregate,
            table_name=table_name_for(aggregate, self.table_prefix),
            catalog_name=self.catalog_name,
            schema_name=self.schema_name,
        )
