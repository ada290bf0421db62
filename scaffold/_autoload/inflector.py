"""File-name to constant-name conversion."""

from __future__ import annotations

from .errors import SetupError


class Inflector:
    """Maps snake_case file stems to CamelCase constant names.

    Overrides registered with ``inflect`` take precedence, for acronyms
    that plain capitalization gets wrong (``html_parser`` -> ``HTMLParser``).
    """

    def __init__(self, overrides: dict[str, str] | None = None):
        self._overrides: dict[str, str] = {}
        if overrides:
            self.inflect(overrides)

    def camelize(self, basename: str) -> str:
        """Return the constant name expected for ``basename``.

        Args:
            basename: File stem or directory name, without extension.

        Returns:
            CamelCase name, e.g. ``"http_client"`` -> ``"HttpClient"``.
        """
        if basename in self._overrides:
            return self._overrides[basename]
        return "".join(part.capitalize() for part in basename.split("_"))

    def inflect(self, overrides: dict[str, str]) -> None:
        """Register overrides, merging with any registered earlier."""
        for basename, name in overrides.items():
            if not name.isidentifier():
                raise SetupError(f"Inflection for {basename!r} is not an identifier: {name!r}")
            self._overrides[basename] = name

    @property
    def overrides(self) -> dict[str, str]:
        """Return a copy of the registered overrides."""
        return dict(self._overrides)
