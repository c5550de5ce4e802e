"""Flask application factory for the navigator web UI.

The ``create_app`` function builds a file system, creates a shell, and
returns a Flask app with three endpoints:

- ``GET /`` — render the terminal HTML page with the welcome banner.
- ``POST /api/execute`` — execute a command and return JSON.
- ``GET /api/status`` — return the current directory and its entries.

The file system is not built for concurrent callers, and Flask's
development server handles requests on several threads.  Every request
that touches the tree therefore holds one lock for its whole duration,
so the cursor and the tree shape are always observed together.
"""

from __future__ import annotations

import threading

from flask import Flask, Response, jsonify, render_template, request

from fs_navigator.config import NavigatorConfig
from fs_navigator.repl import GOODBYE, build_filesystem, format_banner
from fs_navigator.shell import Shell

_HTTP_BAD_REQUEST = 400


def create_app(config: NavigatorConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Session settings; defaults are used if omitted.

    Returns:
        A configured Flask application ready to serve.

    """
    config = config or NavigatorConfig()
    fs = build_filesystem(config)
    shell = Shell(filesystem=fs, config=config)
    lock = threading.Lock()

    banner = format_banner()

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the terminal HTML page."""
        with lock:
            cwd = fs.current_path()
        return render_template(
            "index.html",
            banner=banner,
            prompt_prefix=config.prompt_prefix,
            cwd=cwd,
        )

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a shell command and return JSON output.

        Expects JSON body: ``{"command": "..."}``

        Returns:
            JSON with ``output``, ``cwd`` and ``exited`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST

        command = str(data["command"])  # pyright: ignore[reportUnknownArgumentType]
        with lock:
            if shell.exited:
                return jsonify({"output": GOODBYE, "cwd": fs.current_path(), "exited": True})

            result = shell.execute(command)
            cwd = fs.current_path()

        if result == Shell.EXIT_SENTINEL:
            return jsonify({"output": GOODBYE, "cwd": cwd, "exited": True})
        return jsonify({"output": result, "cwd": cwd, "exited": False})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the current directory and its listing.

        Returns:
            JSON with ``cwd``, ``exited`` and ``entries`` fields.

        """
        with lock:
            payload = {
                "cwd": fs.current_path(),
                "exited": shell.exited,
                "entries": [entry.display() for entry in fs.list_dir()],
            }
        return jsonify(payload)

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``fs-navigator-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
