"""CLI entry point: inspect and verify a package's autoload setup.

Usage:
    python -m scaffold version
    python -m scaffold constants [--package NAME]
    python -m scaffold check [--package NAME]
"""

import argparse
import importlib
import sys

from dotenv import find_dotenv, load_dotenv

import scaffold
from scaffold._autoload import Loader
from scaffold._config import config
from scaffold._utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def find_loader(package_name: str) -> Loader:
    """Return the loader managing ``package_name``, setting one up if needed."""
    package = importlib.import_module(package_name)
    installed = Loader.installed_on(package)
    if installed is not None:
        return installed

    loader = Loader.for_package(package_name)
    loader.setup()
    return loader


def refresh_root_loader() -> None:
    """Apply reloaded configuration to the loader set up on import."""
    loader = scaffold._loader
    loader.inflector.inflect(config.inflections)
    loader.reload()
    if config.eager_load:
        loader.eager_load()


def _cmd_version(args: argparse.Namespace) -> int:
    print(scaffold.__version__)
    return 0


def _cmd_constants(args: argparse.Namespace) -> int:
    loader = find_loader(args.package)
    for name, path in loader.autoloads().items():
        print(f"{args.package}.{name}\t{path}")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    find_loader(args.package).eager_load()
    print("All is good!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffold", description="Inspect and verify autoloaded package namespaces"
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    version = subparsers.add_parser("version", help="Print the package version")
    version.set_defaults(func=_cmd_version)

    for name, func, help_text in (
        ("constants", _cmd_constants, "List autoloadable constants and their files"),
        ("check", _cmd_check, "Eager load every constant and report failures"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--package", default="scaffold", help="Package to inspect (default: scaffold)"
        )
        sub.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        # Values from .env do not override the process environment
        if load_dotenv(find_dotenv(usecwd=True)):
            config.reload()
            refresh_root_loader()
        setup_logging(level=args.log_level)
        return args.func(args)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
