"""
Map request URLs to what the server should do with them.

`match_request` is a pure function of the URL and the configuration; it
never touches the content directory. Rules are tried in a fixed order:

    1. retired host            -> permanent redirect (308) to the canonical origin
    2. "/" and "/daily/"       -> temporary redirect (307) to /daily
    3. "/daily"                -> listing page
    4. "/daily/<date>/"        -> temporary redirect (307) without the slash
    5. "/daily/<date>"         -> single entry page
    6. anything else           -> static file lookup

Paths whose date segment is not YYYY-MM-DD never reach rules 4 and 5 and end
up as static lookups.
"""
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

PERMANENT_REDIRECT = 308
TEMPORARY_REDIRECT = 307

DAILY_DATE_WITH_SLASH_RE = re.compile(r"/daily/(\d{4}-\d{2}-\d{2})/", re.ASCII)
DAILY_DATE_RE = re.compile(r"/daily/(\d{4}-\d{2}-\d{2})", re.ASCII)


@dataclass(frozen=True)
class Redirect:
    location: str
    status: int


@dataclass(frozen=True)
class Listing:
    pass


@dataclass(frozen=True)
class SingleEntry:
    entry_id: str


@dataclass(frozen=True)
class StaticAsset:
    path: str


def match_request(url: str, cfg: dict):
    """Decide how to answer a request for `url`."""
    parts = urlsplit(url)
    origin = f"{parts.scheme}://{parts.netloc}"
    path = parts.path or "/"

    if parts.hostname == cfg["retired_host"]:
        return Redirect(cfg["canonical_origin"], PERMANENT_REDIRECT)

    if path == "/":
        return Redirect(f"{origin}/daily", TEMPORARY_REDIRECT)
    if path == "/daily/":
        return Redirect(f"{origin}/daily", TEMPORARY_REDIRECT)

    if path == "/daily":
        return Listing()

    m = DAILY_DATE_WITH_SLASH_RE.fullmatch(path)
    if m:
        return Redirect(f"{origin}/daily/{m.group(1)}", TEMPORARY_REDIRECT)

    m = DAILY_DATE_RE.fullmatch(path)
    if m:
        return SingleEntry(m.group(1))

    return StaticAsset(path)
