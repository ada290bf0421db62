"""Lazy loader for package namespaces.

A ``Loader`` scans a package directory once, maps every public module to
the constant its file name implies, and installs module-level
``__getattr__``/``__dir__`` hooks (PEP 562) so that each module is only
imported on first reference. Subpackages become namespaces with their own
child loader.
"""

from __future__ import annotations

import importlib
import keyword
import logging
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

from .errors import ConflictingNameError, ExpectedNameError, SetupError
from .inflector import Inflector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Autoload:
    """One autoloadable entry of a directory.

    Attributes:
        name: Constant name the entry is exposed under.
        module_name: Fully qualified module to import.
        path: File or directory the entry comes from.
        namespace: True for subpackages, whose constant is the module itself.
    """

    name: str
    module_name: str
    path: Path
    namespace: bool = False


class Loader:
    """Convention-based autoloader for a single package."""

    def __init__(
        self,
        package_name: str,
        root_dir: str | Path,
        inflector: Inflector | None = None,
        ignored: set[Path] | None = None,
    ):
        """Initialize loader.

        Args:
            package_name: Fully qualified name of the managed package.
            root_dir: Directory of the package.
            inflector: Name inflector; a fresh one is created if omitted.
            ignored: Shared set of ignored absolute paths (used by child loaders).
        """
        self.package_name = package_name
        self.root_dir = Path(root_dir).resolve()
        self.inflector = inflector or Inflector()
        self._ignored: set[Path] = ignored if ignored is not None else set()
        self._autoloads: dict[str, Autoload] = {}
        self._children: dict[str, Loader] = {}
        self._loaded: set[str] = set()
        self._imported: set[str] = set()
        self._lock = threading.RLock()
        self._setup_done = False

    @classmethod
    def for_package(cls, package_name: str, inflector: Inflector | None = None) -> Loader:
        """Create a loader rooted at an imported package's directory.

        Raises:
            SetupError: If ``package_name`` is not an imported package.
        """
        module = sys.modules.get(package_name)
        paths = list(getattr(module, "__path__", None) or [])
        if module is None or not paths:
            raise SetupError(f"{package_name!r} is not an imported package")
        return cls(package_name, paths[0], inflector)

    @staticmethod
    def installed_on(module: ModuleType) -> Loader | None:
        """Return the loader whose hooks are installed on ``module``, if any."""
        owner = getattr(vars(module).get("__getattr__"), "__self__", None)
        return owner if isinstance(owner, Loader) else None

    def ignore(self, *paths: str | Path) -> None:
        """Exclude files or directories from discovery.

        Relative paths are resolved against the root directory.

        Raises:
            SetupError: If called after ``setup()``.
        """
        if self._setup_done:
            raise SetupError(f"Cannot ignore paths after setup of {self.package_name!r}")
        for raw in paths:
            path = Path(raw)
            if not path.is_absolute():
                path = self.root_dir / path
            self._ignored.add(path.resolve())

    @property
    def is_setup(self) -> bool:
        return self._setup_done

    def setup(self) -> None:
        """Scan the root directory and install the lazy-loading hooks.

        Calling it again is a no-op.

        Raises:
            ConflictingNameError: If two entries map to the same constant.
        """
        with self._lock:
            if self._setup_done:
                return
            self._autoloads = self._scan()
            package = self._package()
            package.__getattr__ = self._module_getattr  # type: ignore[attr-defined]
            package.__dir__ = self._module_dir  # type: ignore[attr-defined]
            self._setup_done = True
            logger.debug(
                f"Autoload set up for {self.package_name} ({len(self._autoloads)} constants)"
            )

    def constants(self) -> list[str]:
        """Return the autoloadable names at this level, sorted."""
        return sorted(self._autoloads)

    def autoloads(self) -> dict[str, Path]:
        """Return a mapping of constant name to the path it is loaded from."""
        return {name: entry.path for name, entry in sorted(self._autoloads.items())}

    def eager_load(self) -> None:
        """Resolve every constant now, recursing into namespaces.

        Raises:
            ExpectedNameError: If a module does not define its constant.
            Exception: Whatever an autoloaded module raises on import.
        """
        self._require_setup("eager_load")
        package = self._package()
        for name in self.constants():
            getattr(package, name)
            child = self._children.get(name)
            if child is not None:
                child.eager_load()
        logger.debug(f"Eager loaded {self.package_name}")

    def unload(self) -> None:
        """Forget everything loaded so far; the next access imports again.

        Child loaders, including ones a subpackage installed itself, are unloaded too.
        """
        with self._lock:
            for child in self._children.values():
                child.unload()
            self._children.clear()

            package = sys.modules.get(self.package_name)
            namespace = vars(package) if package is not None else {}
            for name in self._loaded:
                namespace.pop(name, None)
            for module_name in self._imported:
                prefix = module_name + "."
                stale = [key for key in sys.modules if key == module_name or key.startswith(prefix)]
                for key in stale:
                    del sys.modules[key]
                namespace.pop(module_name.rpartition(".")[2], None)

            if self._loaded:
                logger.debug(f"Unloaded {len(self._loaded)} constants from {self.package_name}")
            self._loaded.clear()
            self._imported.clear()

    def reload(self) -> None:
        """Unload and rescan the directory, picking up added or removed files."""
        with self._lock:
            self._require_setup("reload")
            self.unload()
            importlib.invalidate_caches()
            self._autoloads = self._scan()
            logger.info(f"Reloaded {self.package_name}")

    def _require_setup(self, operation: str) -> None:
        if not self._setup_done:
            raise SetupError(f"{operation}() requires setup() on {self.package_name!r} first")

    def _package(self) -> ModuleType:
        package = sys.modules.get(self.package_name)
        if package is None:
            raise SetupError(f"Package {self.package_name!r} is not imported")
        return package

    def _scan(self) -> dict[str, Autoload]:
        found: dict[str, Autoload] = {}
        for entry in sorted(self.root_dir.iterdir()):
            if entry.name.startswith(("_", ".")) or entry.resolve() in self._ignored:
                continue
            if entry.is_dir():
                if not (entry / "__init__.py").is_file():
                    continue
                stem, namespace = entry.name, True
            elif entry.suffix == ".py":
                stem, namespace = entry.stem, False
            else:
                continue
            if not stem.isidentifier() or keyword.iskeyword(stem):
                continue

            name = self.inflector.camelize(stem)
            if name in found:
                raise ConflictingNameError(name, [found[name].path, entry])
            found[name] = Autoload(name, f"{self.package_name}.{stem}", entry, namespace)
        return found

    def _module_getattr(self, name: str) -> Any:
        entry = self._autoloads.get(name)
        if entry is None:
            raise AttributeError(f"module {self.package_name!r} has no attribute {name!r}")
        return self._resolve(entry)

    def _module_dir(self) -> list[str]:
        return sorted(set(vars(self._package())) | set(self._autoloads))

    def _resolve(self, entry: Autoload) -> Any:
        # The import system serializes each module; holding our lock across
        # import_module would deadlock against a thread importing directly.
        try:
            module = importlib.import_module(entry.module_name)
        except Exception:
            logger.error(f"Failed to autoload {entry.name} from {entry.path}")
            raise

        with self._lock:
            package = self._package()
            self._imported.add(entry.module_name)
            # Another thread may have resolved it while we imported.
            if entry.name in vars(package):
                return vars(package)[entry.name]

            if entry.namespace:
                value: Any = module
                self._attach_child(entry, module)
            else:
                if entry.name not in vars(module):
                    raise ExpectedNameError(entry.name, entry.path)
                value = vars(module)[entry.name]

            setattr(package, entry.name, value)
            self._loaded.add(entry.name)
            logger.debug(f"Autoloaded {self.package_name}.{entry.name} from {entry.path}")
            return value

    def _attach_child(self, entry: Autoload, module: ModuleType) -> None:
        # Subpackages that configure their own loader keep it.
        child = Loader.installed_on(module)
        if child is None and "__getattr__" not in vars(module):
            child = Loader(entry.module_name, entry.path, self.inflector, self._ignored)
            child.setup()
        if child is not None:
            self._children[entry.name] = child

    def __repr__(self) -> str:
        return f"Loader({self.package_name!r}, {str(self.root_dir)!r})"
