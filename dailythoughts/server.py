#!/usr/bin/env python3
"""
Daily Thoughts web server.

Usage:
    dailythoughts [config.yml] [--host HOST] [--port PORT] [--debug]

Then open http://localhost:34480/daily in your browser.
"""
import argparse
import logging
from pathlib import Path
from urllib.parse import quote, unquote, urlsplit

from flask import Flask, request, send_from_directory  # pip install flask

from dailythoughts import content, response, templates
from dailythoughts.config import load_config
from dailythoughts.document import Fragment, h
from dailythoughts.exceptions import EntryNotFound, StorageError
from dailythoughts.router import Listing, Redirect, SingleEntry, match_request

logger = logging.getLogger(__name__)


def error_page(title: str, message: str, cfg: dict):
    return templates.page(title, Fragment([h("h2", None, title), h("p", None, message)]), cfg)


def create_app(cfg: dict) -> Flask:
    """
    Build the Flask app for a loaded configuration.

    Every URL goes through one view so that the routing rules in
    `dailythoughts.router` are applied in their own order instead of
    Flask's.
    """
    app = Flask(__name__, static_folder=None)
    app.config["DAILYTHOUGHTS"] = cfg

    @app.route("/", defaults={"path": ""}, strict_slashes=False)
    @app.route("/<path:path>", strict_slashes=False)
    def dispatch(path):
        url = f"{request.scheme}://{request.host}{raw_path()}"
        outcome = match_request(url, cfg)
        logger.debug("%s -> %r", url, outcome)

        if isinstance(outcome, Redirect):
            return response.redirect(outcome)

        if isinstance(outcome, Listing):
            entries = content.list_entries(cfg["content_root"], cfg["order"])
            return response.page(templates.daily_thoughts_page(entries, cfg))

        if isinstance(outcome, SingleEntry):
            md = content.load_entry(cfg["content_root"], outcome.entry_id)
            entries = content.list_entries(cfg["content_root"], cfg["order"])
            document = templates.single_daily_thought_page(outcome.entry_id, md, entries, cfg)
            return response.page(document)

        return serve_static(cfg["static_root"], outcome.path)

    @app.errorhandler(EntryNotFound)
    def entry_not_found(e):
        logger.info("%s", e)
        return response.page(
            error_page("Not Found", "There is no daily thought for that date.", cfg),
            status=404,
        )

    @app.errorhandler(StorageError)
    def storage_error(e):
        logger.exception("Failed to read content: %s", e)
        return response.page(
            error_page("Internal Server Error", "Something went wrong. Please try again later.", cfg),
            status=500,
        )

    return app


def raw_path() -> str:
    """
    The request path as the client sent it, still percent-encoded.

    Routing matches against the encoded form, so "/daily/2024%2D02%2D15" is
    not mistaken for an entry URL.
    """
    raw_uri = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw_uri:
        return urlsplit(raw_uri).path or "/"
    return quote(request.path)


def serve_static(static_root: Path, path: str):
    """Serve a file below `static_root`; directories serve their index.html."""
    filename = unquote(path).lstrip("/")
    if filename == "" or filename.endswith("/"):
        filename += "index.html"
    return send_from_directory(static_root, filename)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve daily thoughts from a directory of markdown files.")
    parser.add_argument("config", nargs="?", type=Path, help="Path to config.yml (defaults apply without one)")
    parser.add_argument("--host", help="Address to bind to (overrides config)")
    parser.add_argument("--port", type=int, help="Port to listen on (overrides config)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    cfg = load_config(args.config)
    if args.host:
        cfg["host"] = args.host
    if args.port:
        cfg["port"] = args.port

    logger.info("Serving entries from %s", cfg["content_root"])
    logger.info("Serving static files from %s", cfg["static_root"])

    app = create_app(cfg)
    app.run(host=cfg["host"], port=cfg["port"], threaded=True)


if __name__ == "__main__":
    main()
