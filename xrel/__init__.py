"""xrel - manifest-driven release packager for Renoise tools."""

__version__ = "0.3.0"
