"""
Dialogue node classes
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class DialogueOption:
    """Represents a choice offered at a node"""
    text: str
    next_node: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'text': self.text,
            'nextNode': self.next_node,
        }


@dataclass(frozen=True)
class DialogueNode:
    """Represents a node in the dialogue tree"""
    text: str
    options: Tuple[DialogueOption, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence of options but store an immutable tuple
        object.__setattr__(self, 'options', tuple(self.options))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'text': self.text,
            'options': [o.to_dict() for o in self.options],
        }

    def is_branch(self) -> bool:
        """Check if this node offers more than one option"""
        return len(self.options) > 1

    def is_terminal(self) -> bool:
        """Check if this node is terminal (no options)"""
        return len(self.options) == 0
