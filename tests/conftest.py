import os
import stat
import sys
import textwrap
from pathlib import Path
from typing import Callable, List

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: List[pytest.Item]) -> None:
    """Skip tests that execute scripts through a shebang line when not on a POSIX system."""
    if os.name == "posix":
        return

    skip_posix = pytest.mark.skip(reason="Executable scripts require a POSIX system, skip test")
    for item in items:
        if any(item.iter_markers(name="requires_posix")):
            item.add_marker(skip_posix)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "requires_posix: test runs executable scripts")


@pytest.fixture
def tmp_solc_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Use an isolated temporary directory as the native compiler base path.

    The fixture points SOLC_INVOKE_TMP_PATH to a not yet existing directory under the test's
    tmp_path, so tests can check that it is created on demand.
    """
    solc_dir = tmp_path / "solc-tmp" / "base"
    monkeypatch.setenv("SOLC_INVOKE_TMP_PATH", str(solc_dir))
    monkeypatch.delenv("SOLC_INVOKE_MAX_OUTPUT_BYTES", raising=False)
    return solc_dir


@pytest.fixture
def make_executable(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a Python script that can be run directly as an executable."""

    def factory(name: str, body: str) -> Path:
        path = tmp_path / name
        path.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return factory
