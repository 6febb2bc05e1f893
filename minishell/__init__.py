"""A small interactive shell with bash-style builtins and its own environment table."""

__version__ = "0.1.0"
__all__ = ["__version__"]