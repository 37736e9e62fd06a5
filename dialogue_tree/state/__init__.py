"""
Traversal state store
"""

from .store import Listener, TraversalSnapshot, TraversalState

__all__ = ["Listener", "TraversalSnapshot", "TraversalState"]
