"""Compiler that runs a native solc executable as a subprocess."""

from __future__ import annotations

import logging
import subprocess
import threading
from pathlib import Path
from typing import IO, ClassVar, List, Optional, Union

from solc_invoke.compile.compiler import (
    Compiler,
    CompilerExecutionError,
    CompilerOutputTooLargeError,
    NativeCompilerSpawnError,
)
from solc_invoke.compile.utils import select_version_args
from solc_invoke.data import JsonDocument, parse_solc_version
from solc_invoke.env import get_max_output_bytes, get_solc_tmp_path

logger = logging.getLogger(__name__)


class NativeProcessCompiler(Compiler):
    """Compiler backed by a native ``solc`` executable driven in ``--standard-json`` mode.

    Every call to :meth:`compile` spawns a fresh process, writes the request to its stdin,
    closes stdin and collects stdout until the process exits. No state is shared between calls,
    so an instance can be used from several threads at once.

    Standard output is capped at ``max_output_bytes``. A compiler that writes more is killed and
    the call fails; output is never truncated.
    """

    _CHUNK_SIZE: ClassVar[int] = 1024 * 1024
    """Read size used while collecting standard output."""

    def __init__(
        self,
        path: Union[str, Path],
        version: Optional[str] = None,
        max_output_bytes: Optional[int] = None,
    ) -> None:
        """Initialize the compiler.

        Parameters
        ----------
        path : Union[str, Path]
            Path of the solc executable.
        version : Optional[str]
            Version of the executable. Selects how import resolution is disabled; when None no
            extra flags are passed.
        max_output_bytes : Optional[int]
            Maximum size of captured standard output. Defaults to
            :func:`solc_invoke.env.get_max_output_bytes`.

        Raises
        ------
        ValueError
            If ``version`` is not a valid semantic version or ``max_output_bytes`` is not positive.
        """
        super().__init__(path)
        if version is not None:
            parse_solc_version(version)
        if max_output_bytes is None:
            max_output_bytes = get_max_output_bytes()
        if max_output_bytes <= 0:
            raise ValueError(f"max_output_bytes must be > 0, got {max_output_bytes}")
        self._version = version
        self._max_output_bytes = max_output_bytes

    @property
    def version(self) -> Optional[str]:
        return self._version

    @property
    def max_output_bytes(self) -> int:
        return self._max_output_bytes

    def build_args(self) -> List[str]:
        """Command line arguments for the executable, without the executable itself.

        Returns
        -------
        List[str]
            ``--standard-json`` followed by the version-dependent flags that disable solc's own
            import callback.
        """
        return ["--standard-json", *select_version_args(self._version, get_solc_tmp_path())]

    def compile(self, input: JsonDocument) -> JsonDocument:
        """Compile a standard JSON request by running the executable.

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
        CompilerInvocationError
            If the request cannot be serialized. No process is started in that case.
        NativeCompilerSpawnError
            If the process cannot be started.
        CompilerOutputTooLargeError
            If the process writes more than ``max_output_bytes`` to stdout.
        CompilerExecutionError
            If the process exits with a non-zero status or its input cannot be written.
        OutputParseError
            If standard output is not a JSON object.
        """
        request = self.serialize_input(input).encode("utf-8")
        command = [str(self._path), *self.build_args()]
        logger.debug("Running native compiler: %s", " ".join(command))

        try:
            process = subprocess.Popen(
                command, stdin=subprocess.PIPE, stdout=subprocess.PIPE, stderr=subprocess.PIPE
            )
        except Exception as e:
            logger.error("Cannot run native compiler '%s': %s", self._path, e)
            raise NativeCompilerSpawnError(
                f"Cannot run native compiler '{self._path}' (version {self._version}): {e}"
            ) from e

        stderr_chunks: List[bytes] = []
        write_errors: List[OSError] = []
        with process:
            writer = threading.Thread(
                target=_write_and_close, args=(process.stdin, request, write_errors), daemon=True
            )
            drainer = threading.Thread(
                target=_drain, args=(process.stderr, stderr_chunks), daemon=True
            )
            writer.start()
            drainer.start()

            stdout = _read_bounded(process.stdout, self._max_output_bytes, self._CHUNK_SIZE)
            if stdout is None:
                process.kill()
            returncode = process.wait()
            writer.join()
            drainer.join()

        stderr = b"".join(stderr_chunks).decode("utf-8", errors="replace")
        if stdout is None:
            logger.error(
                "Native compiler '%s' exceeded the output limit of %d bytes",
                self._path,
                self._max_output_bytes,
            )
            raise CompilerOutputTooLargeError(
                f"Native compiler '{self._path}' (version {self._version}) produced more than "
                f"{self._max_output_bytes} bytes of output",
                returncode=None,
                stderr=stderr,
            )
        if write_errors:
            logger.error(
                "Failed to write input to native compiler '%s': %s", self._path, write_errors[0]
            )
            raise CompilerExecutionError(
                f"Failed to write input to native compiler '{self._path}' "
                f"(version {self._version}): {write_errors[0]}",
                returncode=returncode,
                stderr=stderr,
            ) from write_errors[0]
        if returncode != 0:
            logger.error("Native compiler '%s' exited with status %d", self._path, returncode)
            cause = subprocess.CalledProcessError(returncode, command, output=stdout, stderr=stderr)
            raise CompilerExecutionError(
                f"Native compiler '{self._path}' (version {self._version}) exited with status "
                f"{returncode}: {stderr.strip()}",
                returncode=returncode,
                stderr=stderr,
            ) from cause
        return self.parse_output(stdout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r}, version={self._version!r})"


def _write_and_close(stream: IO[bytes], data: bytes, errors: List[OSError]) -> None:
    try:
        stream.write(data)
    except BrokenPipeError:
        # The process exited without reading its input; its exit status reports why.
        pass
    except OSError as e:
        errors.append(e)
    finally:
        try:
            stream.close()
        except BrokenPipeError:
            pass
        except OSError as e:
            errors.append(e)


def _drain(stream: IO[bytes], chunks: List[bytes]) -> None:
    for chunk in iter(lambda: stream.read(65536), b""):
        chunks.append(chunk)


def _read_bounded(stream: IO[bytes], max_bytes: int, chunk_size: int) -> Optional[bytes]:
    """Read ``stream`` to EOF. Returns None as soon as more than ``max_bytes`` were read."""
    buffer = bytearray()
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        buffer += chunk
        if len(buffer) > max_bytes:
            return None
    return bytes(buffer)
