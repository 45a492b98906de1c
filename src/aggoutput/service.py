"""Output service: resolve and dispatch factories and generators.

The service holds a bound schema plus two ordered collaborator
sequences. Order is priority in both: the first eligible factory
creates default outputs, and the first matching generator renders.

    discover_generator_kinds()      which kinds can render this schema's outputs
    generate_default_output(agg)    aggregate → Output via first eligible factory
    get_artifact(output, kind)      Output → text via one generator
    get_full_artifact(outputs, kind)  [Output, ...] → text via one generator

The service is not thread-safe. bind() and configure() mutate it in
place; callers sharing an instance across threads must serialise access.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from aggoutput.errors import (
    GeneratorCannotRenderError,
    GeneratorNotFoundError,
    InvalidArgumentError,
    NoFactoryAvailableError,
)
from aggoutput.factories.base import OutputFactory
from aggoutput.generators.base import ArtifactGenerator, supports_variant
from aggoutput.models.output import Aggregate, Output, Schema
from aggoutput.models.tags import GeneratorKind

logger = logging.getLogger(__name__)


class OutputService:
    """Pick the factory and generator to use for a schema."""

    def __init__(
        self,
        schema: Schema = None,
        output_factories: Iterable[OutputFactory] = (),
        artifact_generators: Iterable[ArtifactGenerator] = (),
    ) -> None:
        self._schema = schema
        self._output_factories: tuple[OutputFactory, ...] = tuple(output_factories)
        self._artifact_generators: tuple[ArtifactGenerator, ...] = tuple(
            artifact_generators
        )

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def output_factories(self) -> tuple[OutputFactory, ...]:
        return self._output_factories

    @property
    def artifact_generators(self) -> tuple[ArtifactGenerator, ...]:
        return self._artifact_generators

    def bind(self, schema: Schema) -> None:
        """Bind (or rebind) the schema used by all later calls."""
        self._schema = schema

    init = bind

    def configure(
        self,
        output_factories: Iterable[OutputFactory] | None = None,
        artifact_generators: Iterable[ArtifactGenerator] | None = None,
    ) -> None:
        """Replace either collaborator sequence. None leaves it unchanged."""
        if output_factories is not None:
            self._output_factories = tuple(output_factories)
        if artifact_generators is not None:
            self._artifact_generators = tuple(artifact_generators)

    def _first_eligible_factory(self) -> OutputFactory | None:
        for factory in self._output_factories:
            if factory.can_create_output(self._schema):
                return factory
        return None

    def discover_generator_kinds(self) -> frozenset[GeneratorKind]:
        """Return the kinds of generator usable with the bound schema.

        Only the first eligible factory is considered: its output
        variant decides which generators apply. An empty set means no
        factory is eligible or no generator supports its variant.
        """
        factory = self._first_eligible_factory()
        if factory is None:
            logger.debug("No output factory eligible for schema %r", self._schema)
            return frozenset()
        return frozenset(
            generator.kind
            for generator in self._artifact_generators
            if supports_variant(generator, factory.output_variant)
        )

    def generate_default_output(self, aggregate: Aggregate) -> Output:
        """Create an output for `aggregate` using the first eligible factory."""
        if aggregate is None:
            raise InvalidArgumentError("No aggregate provided")
        factory = self._first_eligible_factory()
        if factory is None:
            raise NoFactoryAvailableError(self._schema)
        logger.debug("Creating output for %r with %r", aggregate, factory)
        return factory.create_output(self._schema, aggregate)

    def _resolve_generator(
        self, kind: GeneratorKind, output: Output
    ) -> ArtifactGenerator | None:
        """First generator of `kind` that supports and accepts `output`."""
        for generator in self._artifact_generators:
            if not generator.kind.is_a(kind):
                continue
            if not supports_variant(generator, output.variant):
                continue
            if generator.can_generate(self._schema, output):
                logger.debug("Resolved %s for %s to %r", kind, output, generator)
                return generator
        return None

    def get_artifact(self, output: Output, kind: GeneratorKind) -> str:
        """Render a single output with the first matching generator."""
        if output is None:
            raise InvalidArgumentError("No output provided")
        if kind is None:
            raise InvalidArgumentError("No generator kind provided")
        generator = self._resolve_generator(kind, output)
        if generator is None:
            raise GeneratorNotFoundError(kind, output)
        return generator.generate(self._schema, output)

    def get_full_artifact(self, outputs: Iterable[Output], kind: GeneratorKind) -> str:
        """Render a batch of outputs with a single generator.

        The generator is resolved from the first output; every output
        (the first included) must then pass its can_generate check.
        """
        outputs = list(outputs) if outputs is not None else []
        if not outputs:
            raise InvalidArgumentError("No output provided")
        if kind is None:
            raise InvalidArgumentError("No generator kind provided")
        generator = self._resolve_generator(kind, outputs[0])
        if generator is None:
            raise GeneratorNotFoundError(kind, outputs[0])
        for output in outputs:
            if not generator.can_generate(self._schema, output):
                raise GeneratorCannotRenderError(generator, output)
        return generator.generate_full(self._schema, outputs)
