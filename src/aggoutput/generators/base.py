"""Generator protocol: the interface all artifact generators implement."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from aggoutput.models.output import Output, Schema
from aggoutput.models.tags import GeneratorKind, OutputVariant


class ArtifactGenerator(Protocol):
    """Protocol for artifact generators.

    Each generator renders one or more Outputs into artifact text (a
    DDL or DML script, a schema document, ...). Callers never pick an
    instance directly: they ask the OutputService for a `kind`, and the
    service selects the first registered generator that specialises it.

    Two gates decide whether a generator may render an output:
      - variant compatibility: the output's variant is-a one of
        `supported_output_variants` (checked by the service)
      - eligibility: `can_generate(schema, output)` (checked by the
        service, but implemented here and free to inspect the output)
    """

    kind: GeneratorKind
    supported_output_variants: frozenset[OutputVariant]

    def can_generate(self, schema: Schema, output: Output) -> bool:
        ...

    def generate(self, schema: Schema, output: Output) -> str:
        """Render a single output."""
        ...

    def generate_full(self, schema: Schema, outputs: Sequence[Output]) -> str:
        """Render a batch; only called once every output passed can_generate."""
        ...


def supports_variant(generator: ArtifactGenerator, variant: OutputVariant) -> bool:
    """True if `variant` is-a one of the generator's supported variants."""
    return any(variant.is_a(v) for v in generator.supported_output_variants)
