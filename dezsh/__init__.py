"""A small interactive shell with builtins, pipes and variable expansion."""

__version__ = "0.1.0"
__all__ = ["__version__"]