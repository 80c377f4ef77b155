"""Startup diagnostics for operators."""

from .reporter import StartupReporter

__all__ = ["StartupReporter"]
