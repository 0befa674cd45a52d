"""Compiler registry for selecting and sharing compiler instances."""

from __future__ import annotations

import threading
from typing import ClassVar, Dict, Optional

from solc_invoke.data import CompilerSpec, JsonDocument
from solc_invoke.logging import get_logger

from .compiler import Compiler
from .compilers import InProcessCompiler, NativeProcessCompiler

logger = get_logger("CompilerRegistry")


class CompilerRegistry:
    """Central registry mapping compiler specs to shared compiler instances.

    The host build tool decides which compiler to use (a bundle or a native executable, and
    which version) and describes it with a :class:`CompilerSpec`. The registry turns that spec
    into a :class:`Compiler` and keeps it, so that an in-process bundle is loaded at most once
    per process no matter how many compilation jobs use it.

    This class follows the singleton pattern - use get_instance() to obtain the shared
    registry instance.
    """

    _instance: ClassVar[Optional["CompilerRegistry"]] = None
    """Singleton instance of the CompilerRegistry."""

    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    _compilers: Dict[CompilerSpec, Compiler]
    """Cache mapping compiler specs to compiler instances."""

    def __init__(self) -> None:
        self._compilers = {}
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "CompilerRegistry":
        """Get the singleton registry instance.

        Returns
        -------
        CompilerRegistry
            The shared registry instance.
        """
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = CompilerRegistry()
            return cls._instance

    def get_compiler(self, spec: CompilerSpec) -> Compiler:
        """Return the compiler for a spec, creating it on first request.

        Parameters
        ----------
        spec : CompilerSpec
            Description of the compiler.

        Returns
        -------
        Compiler
            A :class:`NativeProcessCompiler` if ``spec.native`` is set, otherwise an
            :class:`InProcessCompiler`. The same instance is returned for equal specs.
        """
        with self._lock:
            compiler = self._compilers.get(spec)
            if compiler is None:
                compiler = self._create(spec)
                self._compilers[spec] = compiler
                logger.debug("Registered %r", compiler)
            return compiler

    def compile(self, spec: CompilerSpec, input: JsonDocument) -> JsonDocument:
        """Compile a standard JSON request with the compiler described by ``spec``.

        Parameters
        ----------
        spec : CompilerSpec
            Description of the compiler.
        input : JsonDocument
            The standard JSON request.

        Returns
        -------
        JsonDocument
            The standard JSON response.

        Raises
        ------
        CompilerError
            If the compilation fails. See :meth:`Compiler.compile`.
        """
        return self.get_compiler(spec).compile(input)

    def cleanup(self) -> None:
        """Drop all cached compilers. Bundles are loaded again on next use."""
        with self._lock:
            self._compilers.clear()

    @staticmethod
    def _create(spec: CompilerSpec) -> Compiler:
        if spec.native:
            return NativeProcessCompiler(spec.path, spec.version)
        return InProcessCompiler(spec.path, spec.entry_symbol)
