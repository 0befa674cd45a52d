"""Concrete compiler implementations for the in-process and native execution models."""

from .in_process import InProcessCompiler
from .native import NativeProcessCompiler

__all__ = ["InProcessCompiler", "NativeProcessCompiler"]
