"""Run command pipelines between files, with here-document support."""

__version__ = "1.0.0"