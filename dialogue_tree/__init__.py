"""
Dialogue Tree - a branching adventure and the state of a walk through it
"""

__version__ = "0.1.0"

from .errors import DialogueError, InvalidChoiceError, UnknownNodeError
from .graph import STORY, DialogueGraph, DialogueNode, DialogueOption
from .session import DialogueSession
from .state import TraversalSnapshot, TraversalState

__all__ = [
    "DialogueError",
    "DialogueGraph",
    "DialogueNode",
    "DialogueOption",
    "DialogueSession",
    "InvalidChoiceError",
    "STORY",
    "TraversalSnapshot",
    "TraversalState",
    "UnknownNodeError",
]
