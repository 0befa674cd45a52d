"""Utility functions for invoking compilers."""

from __future__ import annotations

import importlib.machinery
import importlib.util
from pathlib import Path
from types import ModuleType
from typing import List, Optional

from solc_invoke.data import parse_solc_version

NO_IMPORT_CALLBACK_MIN_VERSION = "0.8.22"
"""First solc release supporting ``--no-import-callback``."""

BASE_PATH_MIN_VERSION = "0.6.9"
"""First solc release supporting ``--base-path``."""


class RawSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that compiles the file text directly.

    It never reads or writes cached bytecode, so loading a multi-megabyte generated bundle does
    not leave a huge ``.pyc`` behind. Used on its own, outside of the import system, it is not
    subject to ``sys.meta_path`` finders or path hooks that rewrite modules on import.
    """

    def get_code(self, fullname: str):
        source = Path(self.path).read_text(encoding="utf-8")
        return compile(source, self.path, "exec", dont_inherit=True)


def load_module_isolated(path: Path, module_name: str) -> ModuleType:
    """Execute the Python file at ``path`` into a fresh module object.

    The module is built from an explicit spec and loader and executed directly. Nothing in
    ``sys.modules``, ``sys.meta_path`` or ``sys.path_hooks`` is read or modified, so there is
    no global state to restore afterwards and other imports are unaffected.

    Parameters
    ----------
    path : Path
        The file to load.
    module_name : str
        Name given to the module object. It is not registered anywhere.

    Returns
    -------
    ModuleType
        The executed module.

    Raises
    ------
    OSError
        If the file cannot be read.
    Exception
        Whatever the module raises while being compiled or executed.
    """
    loader = RawSourceLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(module_name, str(path), loader=loader)
    module = importlib.util.module_from_spec(spec)
    loader.exec_module(module)
    return module


def select_version_args(version: Optional[str], base_path: Path) -> List[str]:
    """Pick the flags that stop solc from resolving imports on its own.

    All sources are supplied in the standard JSON input, so solc must not read the filesystem:

    - ``>= 0.8.22``: ``--no-import-callback``.
    - ``>= 0.6.9``: ``--base-path <base_path>``, pointing at an empty directory. The directory is
      created (with parents) if missing.
    - older releases or unknown version: nothing.

    Parameters
    ----------
    version : Optional[str]
        The solc version, or None if unknown.
    base_path : Path
        Directory to use as base path for the middle version range.

    Returns
    -------
    List[str]
        The extra command line arguments.
    """
    if version is None:
        return []
    parsed = parse_solc_version(version)
    if parsed >= parse_solc_version(NO_IMPORT_CALLBACK_MIN_VERSION):
        return ["--no-import-callback"]
    if parsed >= parse_solc_version(BASE_PATH_MIN_VERSION):
        base_path.mkdir(parents=True, exist_ok=True)
        return ["--base-path", str(base_path)]
    return []
