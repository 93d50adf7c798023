"""Incremental, change-only emission of group closures."""

from user_group_hierarchy.emitter.emit import IncrementalEmitter
from user_group_hierarchy.emitter.snapshot import ClosureSnapshot

__all__ = ["ClosureSnapshot", "IncrementalEmitter"]
