"""Autoload error hierarchy."""

from __future__ import annotations

from pathlib import Path

from scaffold import Error


class AutoloadError(Error):
    """Base for all loader failures."""


class SetupError(AutoloadError):
    """Loader is misconfigured or used in the wrong order."""


class ConflictingNameError(AutoloadError):
    """Two entries in one directory map to the same constant."""

    def __init__(self, name: str, paths: list[Path]):
        self.name = name
        self.paths = list(paths)
        listed = ", ".join(str(p) for p in self.paths)
        super().__init__(f"{name!r} is defined by more than one entry: {listed}")


class ExpectedNameError(AutoloadError, AttributeError):
    """A module does not define the constant its file name promises.

    Also an AttributeError so that ``getattr(pkg, name, default)`` and
    ``hasattr`` keep their usual semantics.
    """

    def __init__(self, name: str, path: Path):
        super().__init__(f"expected file {path} to define {name!r}, but didn't")
        self.name = name
        self.path = path
