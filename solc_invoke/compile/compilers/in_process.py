"""Compiler that runs a solc bundle inside the current interpreter."""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Callable, ClassVar, Optional, Union

from solc_invoke.compile.compiler import (
    BundleLoadError,
    Compiler,
    CompilerInvocationError,
)
from solc_invoke.compile.utils import load_module_isolated
from solc_invoke.data import JsonDocument

logger = logging.getLogger(__name__)

CompileFunction = Callable[[str], str]
"""Signature of a bundle's compile entry point: standard JSON text in, standard JSON text out."""


class InProcessCompiler(Compiler):
    """Compiler backed by a Python bundle exposing a synchronous compile function.

    The bundle is a (typically very large, generated) Python file defining
    ``compile(input_json: str) -> str``. It is loaded lazily on first use, once per instance,
    through an isolated loader that neither consults nor modifies the interpreter's import
    machinery. Loading is guarded by a lock so concurrent first calls still load only once.

    Each call to :meth:`compile` blocks the calling thread for the duration of the compilation.

    Examples
    --------
    >>> compiler = InProcessCompiler("/opt/solc/soljson-v0.8.24.py")
    >>> output = compiler.compile({"language": "Solidity", "sources": {...}, "settings": {...}})
    """

    _MODULE_PREFIX: ClassVar[str] = "solc_invoke_bundle_"
    """Prefix of the module name given to loaded bundles."""

    def __init__(self, path: Union[str, Path], entry_symbol: str = "compile") -> None:
        """Initialize the compiler. Nothing is loaded until the first compilation.

        Parameters
        ----------
        path : Union[str, Path]
            Path of the bundle file.
        entry_symbol : str
            Name of the compile function exported by the bundle.
        """
        super().__init__(path)
        self._entry_symbol = entry_symbol
        self._loaded: Optional[CompileFunction] = None
        self._load_lock = threading.Lock()

    def compile(self, input: JsonDocument) -> JsonDocument:
        """Compile a standard JSON request with the loaded bundle.

        Parameters
        ----------
        input : JsonDocument
            The standard JSON request.

        Returns
        -------
        JsonDocument
            The parsed standard JSON response.

        Raises
        ------
        BundleLoadError
            If the bundle has not been loaded yet and loading it fails.
        CompilerInvocationError
            If the bundle's compile function raises, or the request cannot be serialized.
        OutputParseError
            If the bundle returns something that is not a JSON object.
        """
        request = self.serialize_input(input)
        compile_fn = self.get_compiler()
        try:
            output = compile_fn(request)
        except Exception as e:
            logger.warning("Compile function of bundle '%s' raised: %s", self._path, e)
            raise CompilerInvocationError(
                f"Compile function '{self._entry_symbol}' of bundle '{self._path}' failed: {e}"
            ) from e
        return self.parse_output(output)

    def get_compiler(self) -> CompileFunction:
        """Return the bundle's compile function, loading the bundle on first call.

        Returns
        -------
        CompileFunction
            The cached compile function.

        Raises
        ------
        BundleLoadError
            If the bundle cannot be loaded. A failed load is not cached, so a later call tries
            again.
        """
        loaded = self._loaded
        if loaded is not None:
            return loaded
        with self._load_lock:
            if self._loaded is None:
                self._loaded = self._load_compiler()
            return self._loaded

    def _load_compiler(self) -> CompileFunction:
        module_name = self._MODULE_PREFIX + re.sub(r"[^0-9a-zA-Z_]", "_", self._path.stem)
        logger.debug("Loading compiler bundle '%s' as '%s'", self._path, module_name)
        try:
            module = load_module_isolated(self._path, module_name)
        except Exception as e:
            logger.error("Failed to load compiler bundle '%s': %s", self._path, e)
            raise BundleLoadError(f"Failed to load compiler bundle '{self._path}': {e}") from e

        compile_fn = getattr(module, self._entry_symbol, None)
        if not callable(compile_fn):
            raise BundleLoadError(
                f"Compiler bundle '{self._path}' does not export a callable "
                f"'{self._entry_symbol}'"
            )
        logger.info("Loaded compiler bundle '%s'", self._path)
        return compile_fn
