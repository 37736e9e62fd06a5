"""
Dialogue graph: nodes, options and the shipped story
"""

from .graph import ROOT_NODE, DialogueGraph
from .node import DialogueNode, DialogueOption
from .story import STORY, get_node

__all__ = [
    "DialogueGraph",
    "DialogueNode",
    "DialogueOption",
    "ROOT_NODE",
    "STORY",
    "get_node",
]
