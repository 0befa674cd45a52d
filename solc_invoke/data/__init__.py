"""Data layer: typed models shared by the compiler and verification subsystems."""

from .compiler_spec import CompilerSpec, parse_solc_version
from .utils import BaseModelWithDocstrings, JsonDocument, NonEmptyString

__all__ = [
    "BaseModelWithDocstrings",
    "CompilerSpec",
    "JsonDocument",
    "NonEmptyString",
    "parse_solc_version",
]
