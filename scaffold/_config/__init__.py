"""Configuration package.

Implementation is in config.py; this module only exposes the shared instance.
"""

from scaffold._config.config import ScaffoldConfig

# Singleton instance - use this throughout the package
config = ScaffoldConfig()

__all__ = ["ScaffoldConfig", "config"]
