"""Scaffold, merge, version and package VSCode color theme extensions."""

__version__ = "0.1.0"
