"""A multi-call toolbox of POSIX-style utilities and a minimal shell."""

__version__ = "0.1.0"