"""Top-level scaffold package.

Provides the namespace for the package's functionality and a base error
class. Public modules placed next to this file are loaded on first
reference: ``http_client.py`` defining ``HttpClient`` becomes
``scaffold.HttpClient`` without an explicit import here.
"""

from __future__ import annotations

from pathlib import Path

from scaffold.version import VERSION

__version__ = VERSION

__all__ = ["Error", "__version__"]


class Error(Exception):
    """Base for all errors raised by this package."""


# Error must exist before the loader import: autoload errors subclass it.
from scaffold._autoload import Loader  # noqa: E402
from scaffold._config import config  # noqa: E402

_loader = Loader.for_package(__name__)
_loader.ignore(Path(__file__).parent / "version.py")
_loader.inflector.inflect(config.inflections)
_loader.setup()

if config.eager_load:
    _loader.eager_load()
