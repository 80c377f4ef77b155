"""Runtime startup orchestration primitives."""

from .lifecycle import LauncherCompositionRoot, LifecyclePhase, LifecycleState

__all__ = ["LauncherCompositionRoot", "LifecyclePhase", "LifecycleState"]
