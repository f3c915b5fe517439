from flask import Response  # pip install flask

from dailythoughts.document import serialize

DOCTYPE = "<!doctype html>"


def page(document, status: int = 200) -> Response:
    """Serialize a document tree into an HTML response."""
    body = (DOCTYPE + serialize(document)).encode("utf-8")
    return Response(body, status=status, content_type="text/html; charset=utf-8")


def redirect(outcome) -> Response:
    """Build a bare redirect response; no document is rendered."""
    response = Response(status=outcome.status)
    response.headers["Location"] = outcome.location
    return response
