"""Survey of markdown features used in popular repository READMEs."""

__version__ = "0.1.0"
