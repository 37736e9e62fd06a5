"""Shared fixtures."""

import pytest

from dialogue_tree.graph import DialogueGraph
from dialogue_tree.session import DialogueSession
from dialogue_tree.state import TraversalState


@pytest.fixture
def state():
    return TraversalState()


@pytest.fixture
def session():
    return DialogueSession()


@pytest.fixture
def loop_graph():
    """Two nodes pointing at each other, with no way out."""
    return DialogueGraph.from_dict(
        {
            "root": {"text": "Ping", "options": [{"text": "Again", "nextNode": "pong"}]},
            "pong": {"text": "Pong", "options": [{"text": "Back", "nextNode": "root"}]},
        }
    )
