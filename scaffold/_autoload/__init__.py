"""Convention-based lazy loading for package namespaces.

Usage:
    from scaffold._autoload import Loader
    loader = Loader.for_package(__name__)
    loader.ignore("version.py")
    loader.setup()
"""

from __future__ import annotations

from .errors import AutoloadError, ConflictingNameError, ExpectedNameError, SetupError
from .inflector import Inflector
from .loader import Loader

__all__ = [
    "AutoloadError",
    "ConflictingNameError",
    "ExpectedNameError",
    "Inflector",
    "Loader",
    "SetupError",
]
