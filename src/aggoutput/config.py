"""Load output service configuration from aggoutput.toml.

Factories and generators are listed under [factories] and [generators].
Each section's `enabled` list gives the priority order; each named
sub-table gives the component's `class` ("module:attr") and any
keyword arguments to construct it with:

    [generators]
    enabled = ["create_table", "drop_table"]

    [generators.create_table]
    class = "aggoutput.generators.template:TemplateGenerator"
    kind = "create_table"
    variants = ["table"]
    template = "CREATE TABLE {{ output.qualified_name }} ();"
"""

from __future__ import annotations

import importlib
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jinja2

from aggoutput.models.output import Schema
from aggoutput.models.tags import KINDS, VARIANTS
from aggoutput.service import OutputService


class ConfigError(ValueError):
    """A component could not be built from its configuration."""


@dataclass
class ComponentConfig:
    """Configuration for a single factory or generator.

    Attributes:
        name: Section name in the TOML file (e.g. 'create_table').
        target: Import path of the class or callable, 'module:attr'.
        params: Keyword arguments passed to the target.
    """

    name: str
    target: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class ServiceConfig:
    """Full service configuration, components in priority order."""

    factories: list[ComponentConfig] = field(default_factory=list)
    generators: list[ComponentConfig] = field(default_factory=list)


def _build_components(data: dict, section_name: str) -> list[ComponentConfig]:
    """Build component configs for one section, in `enabled` order."""
    section = data.get(section_name, {})
    components = []
    for name in section.get("enabled", []):
        sub = section.get(name, {})
        if "class" not in sub:
            raise ConfigError(f"{section_name}.{name}: missing 'class'")
        components.append(ComponentConfig(
            name=name,
            target=sub["class"],
            params={k: v for k, v in sub.items() if k != "class"},
        ))
    return components


def load_config(config_path: Path | str | None = None) -> ServiceConfig:
    """Load service configuration from a TOML file.

    If config_path is None, looks for aggoutput.toml in the current
    directory.
    """
    if config_path is None:
        config_path = Path("aggoutput.toml")
    else:
        config_path = Path(config_path)

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return ServiceConfig(
        factories=_build_components(data, "factories"),
        generators=_build_components(data, "generators"),
    )


def _import_target(component: ComponentConfig):
    module_path, sep, attr = component.target.partition(":")
    if not sep or not module_path or not attr:
        raise ConfigError(
            f"{component.name}: class must be 'module:attr', got {component.target!r}"
        )
    try:
        mod = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigError(f"{component.name}: cannot import {module_path!r}: {e}") from e
    try:
        return getattr(mod, attr)
    except AttributeError:
        raise ConfigError(
            f"{component.name}: module {module_path!r} has no attribute {attr!r}"
        ) from None


def _resolve_tags(component: ComponentConfig) -> dict[str, Any]:
    """Replace tag names in params with the tags themselves."""
    params = dict(component.params)
    try:
        if "kind" in params:
            params["kind"] = KINDS.get(params["kind"])
        if "variants" in params:
            params["variants"] = [VARIANTS.get(v) for v in params["variants"]]
        if "output_variant" in params:
            params["output_variant"] = VARIANTS.get(params["output_variant"])
    except KeyError as e:
        raise ConfigError(f"{component.name}: {e.args[0]}") from None
    return params


def load_component(component: ComponentConfig):
    """Import and construct a configured factory or generator."""
    target = _import_target(component)
    params = _resolve_tags(component)
    try:
        return target(**params)
    except (TypeError, ValueError, jinja2.TemplateError) as e:
        raise ConfigError(f"{component.name}: {e}") from e


def build_service(config: ServiceConfig, schema: Schema = None) -> OutputService:
    """Construct an OutputService with every configured component."""
    return OutputService(
        schema=schema,
        output_factories=[load_component(c) for c in config.factories],
        artifact_generators=[load_component(c) for c in config.generators],
    )
