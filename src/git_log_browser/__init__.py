"""Git Log Browser - interactive terminal browser for commit history."""

__version__ = "0.1.0"
