"""Environment-driven configuration."""

import os
import tempfile
from pathlib import Path

DEFAULT_MAX_OUTPUT_BYTES = 500 * 1024 * 1024
"""Default upper bound on the output captured from a native compiler (500 MiB)."""


def get_solc_tmp_path() -> Path:
    """Directory passed to native compilers as ``--base-path``.

    Controlled by ``SOLC_INVOKE_TMP_PATH``; defaults to ``<system tempdir>/solc-invoke``.
    The directory is not created here.
    """
    value = os.environ.get("SOLC_INVOKE_TMP_PATH")
    if value:
        return Path(value).expanduser()
    return Path(tempfile.gettempdir()) / "solc-invoke"


def get_max_output_bytes() -> int:
    """Maximum number of bytes captured from a native compiler's standard output.

    Controlled by ``SOLC_INVOKE_MAX_OUTPUT_BYTES``; defaults to 500 MiB.

    Raises
    ------
    ValueError
        If the variable is set to something other than a positive integer.
    """
    value = os.environ.get("SOLC_INVOKE_MAX_OUTPUT_BYTES")
    if not value:
        return DEFAULT_MAX_OUTPUT_BYTES
    max_bytes = int(value)
    if max_bytes <= 0:
        raise ValueError(f"SOLC_INVOKE_MAX_OUTPUT_BYTES must be > 0, got {value}")
    return max_bytes
