"""Browser-based web UI for the navigator.

This package provides a Flask application that exposes the shell
through a web browser.  It is an **optional** extra — install with::

    pip install fs-navigator[web]

The ``create_app`` factory in ``app.py`` builds a file system, creates
a shell, and serves three endpoints:

- ``GET /`` — HTML terminal page.
- ``POST /api/execute`` — execute a shell command and return JSON.
- ``GET /api/status`` — current directory and listing for the sidebar.
"""
