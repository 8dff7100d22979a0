"""Utility modules for scene hierarchy printing."""

from .sinks import ListSink, PrintSink

__all__ = [
    "ListSink",
    "PrintSink",
]
