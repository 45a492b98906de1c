"""Data models for output resolution."""

from aggoutput.models.output import Aggregate, Output, Schema, TableOutput
from aggoutput.models.tags import (
    KINDS,
    VARIANTS,
    GeneratorKind,
    OutputVariant,
    TagTable,
    TypeTag,
)

__all__ = [
    "Aggregate",
    "GeneratorKind",
    "KINDS",
    "Output",
    "OutputVariant",
    "Schema",
    "TableOutput",
    "TagTable",
    "TypeTag",
    "VARIANTS",
]
