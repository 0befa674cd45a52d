"""Abstract base class for compiler invokers and the errors they raise."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from solc_invoke.data import JsonDocument


class CompilerError(RuntimeError):
    """Base class for every failure raised while invoking a compiler."""


class BundleLoadError(CompilerError):
    """Raised when an in-process compiler bundle cannot be read, evaluated, or lacks its
    compile entry point."""


class CompilerInvocationError(CompilerError):
    """Raised when the compiler itself fails: the bundle's compile function raised, or the
    native process could not be run or exited with an error."""


class NativeCompilerSpawnError(CompilerInvocationError):
    """Raised when the native compiler process cannot be started. The original ``OSError`` is
    available as ``__cause__``."""


class CompilerExecutionError(CompilerInvocationError):
    """Raised when the native compiler process exits with a non-zero status."""

    def __init__(
        self, message: str, returncode: Optional[int] = None, stderr: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        """Exit status of the process, or None if it was killed before exiting normally."""
        self.stderr = stderr
        """Captured standard error of the process."""


class CompilerOutputTooLargeError(CompilerExecutionError):
    """Raised when the native compiler writes more than the configured maximum to stdout."""


class OutputParseError(CompilerError, ValueError):
    """Raised when the compiler's response text is not a JSON object."""


class Compiler(ABC):
    """Abstract base class for standard JSON compiler invokers.

    A Compiler takes a standard JSON request document and returns the compiler's standard JSON
    response document. Both documents are opaque to the invoker: they are serialized and parsed
    whole, never validated against the compiler's schema.

    Subclasses implement :meth:`compile`; the shared helpers here take care of turning documents
    into text and back.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialize the compiler.

        Parameters
        ----------
        path : Union[str, Path]
            Location of the compiler bundle or executable.
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the compiler bundle or executable."""
        return self._path

    @abstractmethod
    def compile(self, input: JsonDocument) -> JsonDocument:
        """Compile a standard JSON request.

        Parameters
        ----------
        input : JsonDocument
            The standard JSON request (language, sources, settings).

        Returns
        -------
        JsonDocument
            The standard JSON response produced by the compiler.

        Raises
        ------
        CompilerError
            If the compiler cannot be loaded or run, or its output cannot be parsed.
        """
        ...

    def serialize_input(self, input: JsonDocument) -> str:
        """Serialize a request document into the text sent to the compiler.

        Raises
        ------
        CompilerInvocationError
            If the document contains values that cannot be represented as JSON.
        """
        try:
            return json.dumps(input)
        except (TypeError, ValueError) as e:
            raise CompilerInvocationError(
                f"Cannot serialize input for compiler at '{self._path}': {e}"
            ) from e

    def parse_output(self, output: Union[str, bytes]) -> JsonDocument:
        """Parse the compiler's response text.

        Parameters
        ----------
        output : Union[str, bytes]
            Text returned by the compiler. Bytes are decoded as UTF-8.

        Returns
        -------
        JsonDocument
            The parsed response.

        Raises
        ------
        OutputParseError
            If the text is not valid JSON or its top level is not an object.
        """
        try:
            document = json.loads(output)
        except (TypeError, ValueError) as e:
            raise OutputParseError(
                f"Compiler at '{self._path}' produced malformed output: {e}"
            ) from e
        if not isinstance(document, dict):
            raise OutputParseError(
                f"Compiler at '{self._path}' produced a JSON {type(document).__name__} "
                "instead of an object"
            )
        return document

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r})"
