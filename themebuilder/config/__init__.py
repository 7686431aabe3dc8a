"""Builder configuration."""

from themebuilder.config.settings import BuilderSettings

__all__ = ["BuilderSettings"]
