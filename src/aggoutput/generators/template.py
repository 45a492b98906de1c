"""Jinja2-templated artifact generator.

A TemplateGenerator is configured rather than subclassed: its kind,
supported variants and templates are all constructor arguments, so a
config file can declare e.g. a CREATE TABLE generator without any
Python code:

    [generators.create_table]
    class = "aggoutput.generators.template:TemplateGenerator"
    kind = "create_table"
    variants = ["table"]
    template = "CREATE TABLE {{ output.qualified_name }} ();"

Templates see `schema` and `output` (or `outputs` for full_template).
Undefined names raise jinja2.UndefinedError rather than rendering empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import jinja2

from aggoutput.generators.base import supports_variant
from aggoutput.models.output import Output, Schema
from aggoutput.models.tags import GeneratorKind, OutputVariant

_ENV = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


class TemplateGenerator:
    """Render outputs through jinja2 templates.

    Args:
        kind: The generator kind callers request.
        variants: Output variants this generator supports (non-empty).
        template: Template for a single output.
        full_template: Optional template for a batch. When omitted, the
            per-output renders are joined with `separator`.
        separator: Joins per-output renders in generate_full.
        required_attrs: Output attributes that must be set for
            can_generate to accept an output. None and "" count as unset;
            other falsy values such as 0 or False are accepted.
    """

    def __init__(
        self,
        kind: GeneratorKind,
        variants: Iterable[OutputVariant],
        template: str,
        full_template: str | None = None,
        separator: str = "\n",
        required_attrs: Iterable[str] = (),
    ) -> None:
        self.kind = kind
        self.supported_output_variants = frozenset(variants)
        if not self.supported_output_variants:
            raise ValueError(f"generator {kind} must support at least one variant")
        self._template = _ENV.from_string(template)
        self._full_template = (
            _ENV.from_string(full_template) if full_template is not None else None
        )
        self.separator = separator
        self.required_attrs = tuple(required_attrs)

    def can_generate(self, schema: Schema, output: Output) -> bool:
        if not supports_variant(self, output.variant):
            return False
        return all(
            getattr(output, attr, None) not in (None, "")
            for attr in self.required_attrs
        )

    def generate(self, schema: Schema, output: Output) -> str:
        return self._template.render(schema=schema, output=output)

    def generate_full(self, schema: Schema, outputs: Sequence[Output]) -> str:
        if self._full_template is not None:
            return self._full_template.render(schema=schema, outputs=list(outputs))
        return self.separator.join(self.generate(schema, o) for o in outputs)

    def __repr__(self) -> str:
        variants = ",".join(sorted(v.name for v in self.supported_output_variants))
        return f"TemplateGenerator(kind={self.kind}, variants={variants})"
