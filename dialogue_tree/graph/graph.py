"""
Immutable dialogue graph: node id -> DialogueNode
"""

from collections import deque
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from dialogue_tree.errors import UnknownNodeError
from dialogue_tree.graph.node import DialogueNode, DialogueOption

ROOT_NODE = "root"


class DialogueGraph(Mapping):
    """Read-only mapping from node id to node content.

    Built once from a literal mapping and never mutated afterwards. Lookups
    are by key only; the declaration order of nodes carries no meaning.
    """

    def __init__(self, nodes: Dict[str, DialogueNode], root: str = ROOT_NODE):
        self._nodes = MappingProxyType(dict(nodes))
        self.root = root

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Any]], root: str = ROOT_NODE) -> "DialogueGraph":
        """Build a graph from ``{id: {"text": ..., "options": [{"text", "nextNode"}]}}``"""
        nodes = {}
        for node_id, raw in data.items():
            options = [DialogueOption(text=o["text"], next_node=o["nextNode"]) for o in raw.get("options", [])]
            nodes[node_id] = DialogueNode(text=raw["text"], options=options)
        return cls(nodes, root=root)

    def __getitem__(self, node_id: str) -> DialogueNode:
        return self.get_node(node_id)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DialogueGraph(root={self.root!r}, nodes={len(self)})"

    def get_node(self, node_id: str) -> DialogueNode:
        """Look up a node, raising UnknownNodeError for an absent id"""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def dangling_references(self) -> List[Tuple[str, DialogueOption]]:
        """Options whose target is not a node of this graph"""
        dangling = []
        for node_id, node in self._nodes.items():
            for option in node.options:
                if option.next_node not in self._nodes:
                    dangling.append((node_id, option))
        return dangling

    def terminal_nodes(self) -> Set[str]:
        return {node_id for node_id, node in self._nodes.items() if node.is_terminal()}

    def reachable_from(self, start: Optional[str] = None) -> Set[str]:
        """Node ids reachable from start (the root by default), start included"""
        start = self.root if start is None else start
        if start not in self._nodes:
            return set()

        reachable = {start}
        queue = deque([start])
        while queue:
            node = self._nodes[queue.popleft()]
            for option in node.options:
                target = option.next_node
                if target in self._nodes and target not in reachable:
                    reachable.add(target)
                    queue.append(target)
        return reachable

    def stats(self) -> Dict[str, int]:
        """Counts describing the shape of the graph"""
        nodes = self._nodes.values()
        return {
            "nodes": len(self._nodes),
            "options": sum(len(node.options) for node in nodes),
            "branching": sum(1 for node in nodes if node.is_branch()),
            "linear": sum(1 for node in nodes if len(node.options) == 1),
            "terminal": sum(1 for node in nodes if node.is_terminal()),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict"""
        return {
            "root": self.root,
            "nodes": {node_id: node.to_dict() for node_id, node in self._nodes.items()},
        }
