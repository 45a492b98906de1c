"""Typed failures raised by the output service.

All of these are validation failures reported synchronously to the
caller. Faults raised by factories or generators themselves are not
wrapped and propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from aggoutput.models.tags import GeneratorKind


class OutputValidationError(Exception):
    """Base class for output service failures."""


class InvalidArgumentError(OutputValidationError, ValueError):
    """A required input was missing or empty."""


class NoFactoryAvailableError(OutputValidationError):
    """No registered factory can create an output for the bound schema."""

    def __init__(self, schema: Any) -> None:
        self.schema = schema
        super().__init__("Failed to locate an output factory for the bound schema")


class GeneratorNotFoundError(OutputValidationError):
    """No registered generator matches the requested kind and output."""

    def __init__(self, kind: GeneratorKind, output: Any) -> None:
        self.kind = kind
        self.output = output
        super().__init__(
            f"Failed to locate generator of kind {kind} "
            f"compatible with output {output}"
        )


class GeneratorCannotRenderError(OutputValidationError):
    """A resolved generator rejected one output of a batch.

    Attributes:
        generator: The generator resolved from the first output.
        kind: The generator's concrete kind.
        output: The first output the generator refused.
    """

    def __init__(self, generator: Any, output: Any) -> None:
        self.generator = generator
        self.kind = generator.kind
        self.output = output
        super().__init__(
            f"Generator {type(generator).__name__} ({self.kind}) cannot "
            f"generate output {output}. Unable to generate full artifact."
        )
