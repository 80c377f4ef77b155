"""Node store state inspection primitives."""

from .inspector import STORE_MARKER, StateInspector

__all__ = ["STORE_MARKER", "StateInspector"]
