"""Tests for the Flask JSON API."""

import logging
import sys

import pytest
from flask import Flask

from dialogue_tree.content.guides import DEFAULT_GUIDES_ROOT
from dialogue_tree.web.app import create_app, main

VALID_GUIDE = """---
title: On Dragons
author: The Cartographer
description: A field guide.
bannerImg: /images/dragon.png
---
Body
"""


@pytest.fixture
def app(tmp_path):
    (tmp_path / "dragons.md").write_text(VALID_GUIDE, encoding="utf-8")
    (tmp_path / "broken.md").write_text("no frontmatter", encoding="utf-8")
    app = create_app(guides_root=tmp_path)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


class TestGraphEndpoints:
    """Test read-only graph lookups."""

    def test_graph(self, client):
        data = client.get("/api/graph").get_json()
        assert data["root"] == "root"
        assert set(data["nodes"]) == {
            "root", "leftPath", "rightPath", "befriendDragon", "runAway", "openChest", "leaveChest",
        }

    def test_node(self, client):
        response = client.get("/api/node/rightPath")
        assert response.status_code == 200
        data = response.get_json()
        assert data["id"] == "rightPath"
        assert data["terminal"] is False
        assert [o["nextNode"] for o in data["options"]] == ["openChest", "leaveChest"]

    def test_unknown_node(self, client):
        response = client.get("/api/node/dungeon")
        assert response.status_code == 404
        assert response.get_json()["node"] == "dungeon"


class TestTraversal:
    """Test walking the dialogue over HTTP."""

    def test_initial_state(self, client):
        data = client.get("/api/state").get_json()
        assert data["currentNode"] == "root"
        assert data["history"] == []
        assert data["finished"] is False
        assert data["version"] == 0

    def test_select_by_label(self, client):
        data = client.post("/api/select", json={"option": "Go Left"}).get_json()
        assert data["advanced"] is True
        assert data["selected"] == {"text": "Go Left", "nextNode": "leftPath"}
        assert data["currentNode"] == "leftPath"
        assert data["history"] == ["root"]
        assert data["version"] == 1

    def test_select_by_position_to_ending(self, client):
        client.post("/api/select", json={"option": 1})
        data = client.post("/api/select", json={"option": "Befriend the dragon"}).get_json()
        assert data["currentNode"] == "befriendDragon"
        assert data["history"] == ["root", "leftPath"]
        assert data["finished"] is True
        assert data["node"]["options"] == []

    def test_select_at_ending_is_noop(self, client):
        client.post("/api/select", json={"option": "Go Right"})
        client.post("/api/select", json={"option": "Leave it alone"})
        response = client.post("/api/select", json={"option": 1})
        assert response.status_code == 200
        data = response.get_json()
        assert data["advanced"] is False
        assert data["currentNode"] == "leaveChest"
        assert data["history"] == ["root", "rightPath"]

    @pytest.mark.parametrize("payload", [{}, {"option": None}, {"option": True}, {"option": [1]}])
    def test_missing_option(self, client, payload):
        response = client.post("/api/select", json=payload)
        assert response.status_code == 400

    def test_invalid_option(self, client):
        response = client.post("/api/select", json={"option": "Fly away"})
        assert response.status_code == 400
        assert "Fly away" in response.get_json()["error"]

    def test_reset(self, client, app):
        client.post("/api/select", json={"option": "Go Left"})
        data = client.post("/api/reset").get_json()
        assert data["currentNode"] == "root"
        assert data["history"] == []
        assert app.config["TRAVERSAL_STATE"].get_current() == "root"
        assert data["version"] == 2


class TestGuides:
    """Test the guides listing."""

    def test_lists_valid_guides_and_issues(self, client):
        data = client.get("/api/guides").get_json()
        assert [g["slug"] for g in data["guides"]] == ["dragons"]
        assert data["guides"][0]["bannerImg"] == "/images/dragon.png"
        assert data["issues"][0]["file"] == "broken"


class TestServerSetup:
    """Test configuration and the development server entry point."""

    def test_default_guides_root(self):
        app = create_app()
        assert app.config["GUIDES_ROOT"] == DEFAULT_GUIDES_ROOT

    def test_transitions_logged_at_debug(self, client, caplog):
        caplog.set_level(logging.DEBUG, logger="dialogue_tree.web.app")
        client.post("/api/select", json={"option": "Go Left"})

        records = [r for r in caplog.records if r.name == "dialogue_tree.web.app"]
        assert records
        assert all(r.levelno == logging.DEBUG for r in records)

    def test_server_runs_single_threaded(self, monkeypatch, tmp_path):
        """Requests share one TraversalState, so the server must not use threads."""
        calls = []
        monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.append(kwargs))
        monkeypatch.setattr(sys, "argv", ["dialogue-tree-web", "--guides", str(tmp_path), "--port", "5055"])

        main()

        assert len(calls) == 1
        assert calls[0]["threaded"] is False
        assert calls[0]["port"] == 5055
