"""
Observable traversal state for a dialogue session
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from dialogue_tree.graph.graph import ROOT_NODE
from dialogue_tree.graph.node import DialogueOption

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraversalSnapshot:
    """Immutable view of the traversal state handed to observers"""

    current_node: str
    history: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert state to JSON-serializable dict"""
        return {
            "currentNode": self.current_node,
            "history": list(self.history),
        }


Listener = Callable[[TraversalSnapshot], None]


class TraversalState:
    """
    The current node and the ordered history of visited nodes.

    ``select_option`` and ``reset`` are the only writers. Every change is
    published synchronously to subscribers, in subscription order.
    """

    def __init__(self, root: str = ROOT_NODE):
        self.root = root
        self._current_node = root
        self._history: List[str] = []
        self._listeners: List[Listener] = []

    def get_current(self) -> str:
        return self._current_node

    def get_history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    def snapshot(self) -> TraversalSnapshot:
        return TraversalSnapshot(self._current_node, tuple(self._history))

    def select_option(self, option: DialogueOption):
        """
        Move to the option's target node.

        The option is trusted to belong to the current node; neither that nor
        the target id is checked here.
        """
        logger.debug("Transition %s -> %s (%r)", self._current_node, option.next_node, option.text)
        self._history.append(self._current_node)
        self._current_node = option.next_node
        self._notify()

    def reset(self):
        """Return to the root node and forget the history"""
        logger.debug("Reset to %s after %d step(s)", self.root, len(self._history))
        self._current_node = self.root
        self._history = []
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        snapshot = self.snapshot()
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(snapshot)
