"""
Flask web application for Dialogue Tree - JSON API for a browser front end
"""

import logging
from pathlib import Path

from flask import Flask, jsonify, request

from dialogue_tree.content.guides import DEFAULT_GUIDES_ROOT, GuideValidator
from dialogue_tree.errors import InvalidChoiceError, UnknownNodeError
from dialogue_tree.graph.graph import DialogueGraph
from dialogue_tree.graph.story import STORY
from dialogue_tree.session import DialogueSession
from dialogue_tree.state.store import TraversalSnapshot, TraversalState

logger = logging.getLogger(__name__)


def _state_payload(session: DialogueSession, version: int) -> dict:
    """Current state plus the content needed to render it"""
    return {
        **session.state.snapshot().to_dict(),
        "node": session.node.to_dict(),
        "finished": session.is_finished(),
        "version": version,
    }


def create_app(graph: DialogueGraph = None, guides_root=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)

    graph = graph if graph is not None else STORY

    guides_root = Path(guides_root) if guides_root is not None else DEFAULT_GUIDES_ROOT

    state = TraversalState(root=graph.root)
    session = DialogueSession(graph, state)

    def track_changes(snapshot: TraversalSnapshot):
        app.config["STATE_VERSION"] += 1
        logger.debug("State v%d: %s", app.config["STATE_VERSION"], snapshot.current_node)

    state.subscribe(track_changes)

    app.config["GUIDES_ROOT"] = guides_root
    app.config["ROOT_NODE"] = graph.root
    app.config["DIALOGUE_GRAPH"] = graph
    app.config["TRAVERSAL_STATE"] = state
    app.config["DIALOGUE_SESSION"] = session
    app.config["STATE_VERSION"] = 0

    @app.errorhandler(UnknownNodeError)
    def unknown_node(e):
        return jsonify({"error": str(e), "node": e.node_id}), 404

    @app.route("/api/graph")
    def get_graph():
        """The whole dialogue graph"""
        return jsonify(app.config["DIALOGUE_GRAPH"].to_dict())

    @app.route("/api/node/<node_id>")
    def get_node(node_id):
        node = app.config["DIALOGUE_GRAPH"].get_node(node_id)
        return jsonify({"id": node_id, **node.to_dict(), "terminal": node.is_terminal()})

    @app.route("/api/state")
    def get_state():
        return jsonify(_state_payload(app.config["DIALOGUE_SESSION"], app.config["STATE_VERSION"]))

    @app.route("/api/select", methods=["POST"])
    def select_option():
        """Select an option of the current node by 1-based position or label"""
        data = request.get_json(silent=True) or {}
        choice = data.get("option")

        if choice is None or isinstance(choice, bool) or not isinstance(choice, (int, str)):
            return jsonify({"error": "No option specified"}), 400

        current = app.config["DIALOGUE_SESSION"]
        try:
            option = current.choose(choice)
        except InvalidChoiceError as e:
            return jsonify({"error": str(e)}), 400

        return jsonify(
            {
                "advanced": option is not None,
                "selected": option.to_dict() if option is not None else None,
                **_state_payload(current, app.config["STATE_VERSION"]),
            }
        )

    @app.route("/api/reset", methods=["POST"])
    def reset():
        current = app.config["DIALOGUE_SESSION"]
        current.restart()
        return jsonify(_state_payload(current, app.config["STATE_VERSION"]))

    @app.route("/api/guides")
    def list_guides():
        """Valid guides plus any frontmatter problems"""
        validator = GuideValidator(app.config["GUIDES_ROOT"])
        validator.validate()
        return jsonify(
            {
                "guides": [guide.to_dict() for guide in validator.guides],
                "issues": [
                    {"file": issue.file, "field": issue.field, "message": issue.message}
                    for issue in validator.issues
                ],
            }
        )

    return app


def main():
    """Run the development server"""
    import argparse

    parser = argparse.ArgumentParser(description="Dialogue Tree Web API")
    parser.add_argument("--guides", "-g", help="Path to guides directory", default=None)
    parser.add_argument("--port", "-p", help="Port to run on", type=int, default=5000)
    parser.add_argument("--debug", help="Run in debug mode", action="store_true")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    app = create_app(guides_root=args.guides)

    print(f"\n{'=' * 60}")
    print("🎭 Dialogue Tree Web API")
    print(f"{'=' * 60}")
    print(f"\n📂 Guides directory: {app.config['GUIDES_ROOT']}")
    print(f"🌐 Server running at: http://localhost:{args.port}")
    print("\nPress Ctrl+C to stop\n")

    # One shared TraversalState: serve requests one at a time
    app.run(host="127.0.0.1", port=args.port, debug=args.debug, threaded=False)


if __name__ == "__main__":
    main()
