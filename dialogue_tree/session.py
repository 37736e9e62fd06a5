"""
A play session: the dialogue graph together with its traversal state
"""

import logging
from typing import List, Optional, Tuple, Union

from dialogue_tree.errors import InvalidChoiceError
from dialogue_tree.graph.graph import DialogueGraph
from dialogue_tree.graph.node import DialogueNode, DialogueOption
from dialogue_tree.graph.story import STORY
from dialogue_tree.state.store import TraversalState

logger = logging.getLogger(__name__)


class DialogueSession:
    """What a presentation layer talks to while a dialogue is being played"""

    def __init__(self, graph: DialogueGraph = None, state: TraversalState = None):
        self.graph = graph if graph is not None else STORY
        self.state = state if state is not None else TraversalState(root=self.graph.root)

    @property
    def node_id(self) -> str:
        return self.state.get_current()

    @property
    def node(self) -> DialogueNode:
        """Content of the current node; UnknownNodeError on a dangling id"""
        return self.graph.get_node(self.state.get_current())

    @property
    def options(self) -> Tuple[DialogueOption, ...]:
        return self.node.options

    def is_finished(self) -> bool:
        return self.node.is_terminal()

    def find_option(self, choice: Union[int, str]) -> DialogueOption:
        """
        Resolve a choice to one of the current node's options.

        Args:
            choice: 1-based position of the option, or its display text

        Raises:
            InvalidChoiceError: if nothing matches
        """
        options = self.options
        if isinstance(choice, bool):
            raise InvalidChoiceError(self.node_id, choice)
        if isinstance(choice, int):
            if 1 <= choice <= len(options):
                return options[choice - 1]
        elif isinstance(choice, str):
            for option in options:
                if option.text == choice:
                    return option
        raise InvalidChoiceError(self.node_id, choice)

    def choose(self, choice: Union[int, str]) -> Optional[DialogueOption]:
        """
        Select an option of the current node and advance.

        Returns the selected option, or None when the current node is
        terminal; in that case the state is left untouched.
        """
        if self.is_finished():
            logger.debug("Node %s is terminal, nothing to choose", self.node_id)
            return None

        option = self.find_option(choice)
        self.state.select_option(option)
        return option

    def restart(self):
        self.state.reset()

    def path(self) -> List[str]:
        """Visited node ids followed by the current one"""
        return list(self.state.get_history()) + [self.state.get_current()]
