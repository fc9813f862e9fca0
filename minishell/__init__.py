"""A small interactive Unix shell with pipes, redirection, job control and history."""

__version__ = "0.1.0"
__all__ = ["__version__"]