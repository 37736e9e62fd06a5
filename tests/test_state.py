"""Tests for the traversal state store."""

import pytest

from dialogue_tree.graph import STORY, DialogueOption
from dialogue_tree.state import TraversalSnapshot, TraversalState


def option_labeled(node_id: str, text: str) -> DialogueOption:
    """Fetch an option of a shipped node by its label."""
    for option in STORY.get_node(node_id).options:
        if option.text == text:
            return option
    raise AssertionError(f"No option '{text}' at {node_id}")


class TestInitialState:
    """A fresh store starts at the root with no history."""

    def test_starts_at_root(self, state):
        assert state.get_current() == "root"
        assert state.get_history() == ()

    def test_custom_root(self):
        state = TraversalState(root="intro")
        assert state.get_current() == "intro"

    def test_reads_are_idempotent(self, state):
        """Repeated reads without a write return identical results."""
        assert state.get_current() == state.get_current()
        assert state.get_history() == state.get_history()
        assert state.snapshot() == state.snapshot()

    def test_history_cannot_be_mutated_through_reads(self, state):
        state.select_option(option_labeled("root", "Go Left"))
        history = state.get_history()
        assert isinstance(history, tuple)
        assert state.get_history() == ("root",)


class TestSelectOption:
    """Test the single write path."""

    def test_select_appends_prior_node(self, state):
        """After each selection the last history entry is the node we left."""
        path = [("root", "Go Right"), ("rightPath", "Open the chest")]
        for node_id, label in path:
            before = state.get_current()
            option = option_labeled(node_id, label)
            state.select_option(option)
            assert state.get_history()[-1] == before
            assert state.get_current() == option.next_node

    def test_scenario_go_left(self, state):
        state.select_option(option_labeled("root", "Go Left"))
        assert state.get_current() == "leftPath"
        assert list(state.get_history()) == ["root"]

    def test_scenario_befriend_dragon(self, state):
        state.select_option(option_labeled("root", "Go Left"))
        state.select_option(option_labeled("leftPath", "Befriend the dragon"))
        assert state.get_current() == "befriendDragon"
        assert list(state.get_history()) == ["root", "leftPath"]
        assert STORY.get_node("befriendDragon").options == ()

    def test_scenario_leave_chest(self, state):
        state.select_option(option_labeled("root", "Go Right"))
        state.select_option(option_labeled("rightPath", "Leave it alone"))
        assert state.get_current() == "leaveChest"
        assert list(state.get_history()) == ["root", "rightPath"]

    def test_no_validation_of_target(self, state):
        """The store trusts its caller; unknown targets are not checked here."""
        state.select_option(DialogueOption(text="Teleport", next_node="nowhere"))
        assert state.get_current() == "nowhere"
        assert state.get_history() == ("root",)

    def test_reset(self, state):
        state.select_option(option_labeled("root", "Go Left"))
        state.reset()
        assert state.get_current() == "root"
        assert state.get_history() == ()


class TestSubscriptions:
    """Test change notification."""

    def test_listener_receives_snapshot(self, state):
        seen = []
        state.subscribe(seen.append)
        state.select_option(option_labeled("root", "Go Left"))
        assert seen == [TraversalSnapshot("leftPath", ("root",))]

    def test_every_change_is_published(self, state):
        seen = []
        state.subscribe(lambda snap: seen.append(snap.current_node))
        state.select_option(option_labeled("root", "Go Right"))
        state.select_option(option_labeled("rightPath", "Open the chest"))
        state.reset()
        assert seen == ["rightPath", "openChest", "root"]

    def test_listeners_called_in_order(self, state):
        calls = []
        state.subscribe(lambda snap: calls.append("first"))
        state.subscribe(lambda snap: calls.append("second"))
        state.reset()
        assert calls == ["first", "second"]

    def test_unsubscribe(self, state):
        seen = []
        unsubscribe = state.subscribe(seen.append)
        unsubscribe()
        unsubscribe()  # second call is harmless
        state.select_option(option_labeled("root", "Go Left"))
        assert seen == []

    def test_unsubscribe_during_notification(self, state):
        """A listener removing itself must not skip the next listener."""
        calls = []

        def once(snap):
            calls.append("once")
            unsubscribe_once()

        unsubscribe_once = state.subscribe(once)
        state.subscribe(lambda snap: calls.append("always"))
        state.reset()
        state.reset()
        assert calls == ["once", "always", "always"]

    def test_listener_error_propagates(self, state):
        def broken(snap):
            raise RuntimeError("render failed")

        state.subscribe(broken)
        with pytest.raises(RuntimeError):
            state.reset()

    def test_snapshot_to_dict(self, state):
        state.select_option(option_labeled("root", "Go Left"))
        assert state.snapshot().to_dict() == {"currentNode": "leftPath", "history": ["root"]}
