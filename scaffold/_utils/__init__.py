"""Internal helpers shared by the package and its CLI."""
