"""Pytest configuration and shared fixtures for tests."""

import importlib
import logging
import sys
import textwrap
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path
from types import ModuleType

import pytest

from scaffold._config import ScaffoldConfig, config


def _purge(package_name: str) -> None:
    prefix = package_name + "."
    for key in [k for k in sys.modules if k == package_name or k.startswith(prefix)]:
        del sys.modules[key]


@pytest.fixture
def make_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Callable[..., ModuleType]]:
    """Build a throwaway package under tmp_path and import it.

    Usage:
        pkg = make_package({"http_client.py": "class HttpClient: ..."})

    Keys are paths relative to the package root; values are file contents
    (dedented). ``__init__.py`` files are created for every directory that
    lacks one. The package gets a unique name so tests never share
    ``sys.modules`` entries.
    """
    created: list[str] = []
    monkeypatch.syspath_prepend(str(tmp_path))

    def factory(files: dict[str, str], init: str = "") -> ModuleType:
        name = f"autoload_fixture_{uuid.uuid4().hex[:8]}"
        root = tmp_path / name
        root.mkdir()
        (root / "__init__.py").write_text(textwrap.dedent(init), encoding="utf-8")
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content), encoding="utf-8")
        for directory in [p for p in root.rglob("*") if p.is_dir()]:
            if directory.name != "__pycache__":
                (directory / "__init__.py").touch(exist_ok=True)

        created.append(name)
        importlib.invalidate_caches()
        return importlib.import_module(name)

    yield factory

    for name in created:
        _purge(name)



@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    package_logger = logging.getLogger("scaffold")
    handlers, level, package_level = list(root.handlers), root.level, package_logger.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    package_logger.setLevel(package_level)


@pytest.fixture
def restore_config() -> Iterator[ScaffoldConfig]:
    """Put the shared configuration back after a test reloads it."""
    snapshot = dict(vars(config))
    yield config
    vars(config).clear()
    vars(config).update(snapshot)
