"""Output factory protocol: the interface all factories implement."""

from __future__ import annotations

from typing import Protocol

from aggoutput.models.output import Aggregate, Output, Schema
from aggoutput.models.tags import OutputVariant


class OutputFactory(Protocol):
    """Protocol for output factories.

    A factory turns an aggregate selected against a schema into an
    Output. Factories are stateless: eligibility depends only on the
    schema, and every output it creates has `output_variant`.
    """

    output_variant: OutputVariant

    def can_create_output(self, schema: Schema) -> bool:
        """Whether this factory can create outputs for `schema`."""
        ...

    def create_output(self, schema: Schema, aggregate: Aggregate) -> Output:
        """Create the output for `aggregate`."""
        ...
