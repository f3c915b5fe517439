from typing import NamedTuple, Optional

from dailythoughts.document import Element, Fragment, Markup, Text, h
from dailythoughts.markdown_render import render_markdown


class Navigation(NamedTuple):
    """Position of an entry in the entry list and its neighbours."""

    index: Optional[int]
    previous: Optional[str]
    next: Optional[str]


def navigation(entry_id: str, entries) -> Navigation:
    """
    Find the previous and next entries around `entry_id`.

    The list is expected newest first, so the previous (older) thought sits
    at index + 1 and the next (newer) one at index - 1. The first entry has
    no next, the last one no previous. An id missing from the list has no
    neighbours at all.
    """
    try:
        index = entries.index(entry_id)
    except ValueError:
        return Navigation(None, None, None)

    previous = entries[index + 1] if index + 1 < len(entries) else None
    next_ = entries[index - 1] if index > 0 else None
    return Navigation(index, previous, next_)


def daily_thought_link(entry_id: str, label: str) -> Element:
    return h("a", {"href": f"/daily/{entry_id}"}, label)


def daily_thought_item(entry_id: str) -> Element:
    return h("li", {"class": "my-4 font-bold text-lg"}, daily_thought_link(entry_id, entry_id))


def daily_thoughts_page(entries, cfg: dict) -> Element:
    """
    Render the listing page: one link per entry, in the order given.
    """
    intro = None
    if cfg.get("listing_intro"):
        intro = Markup(render_markdown(cfg["listing_intro"]))

    items = [daily_thought_item(entry_id) for entry_id in entries]

    return page(
        "Daily Thoughts",
        Fragment(
            [
                h("h2", None, "Daily Thoughts"),
                intro,
                h("ol", {"class": "m-8"}, *items),
            ]
        ),
        cfg,
    )


def single_daily_thought_page(entry_id: str, md: str, entries, cfg: dict) -> Element:
    """
    Render one entry with a link back to the list and prev/next links.

    Raw HTML in the entry is sanitized, except for <source src="..."> which
    embedded videos need.
    """
    body = render_markdown(
        md,
        allowed_tags=["source"],
        allowed_attributes={"source": ["src"]},
    )

    nav = navigation(entry_id, entries)

    links = []
    if nav.previous:
        links.append(
            h(
                "span",
                {"class": "col-1 justify-self-start"},
                daily_thought_link(nav.previous, "<< previous thought"),
            )
        )
    if nav.next:
        links.append(
            h(
                "span",
                {"class": "col-2 justify-self-end"},
                daily_thought_link(nav.next, "next thought >>"),
            )
        )

    nav_row = h("div", {"class": "grid grid-cols-2"}, *links) if links else None

    title = f"Daily Thought - {entry_id}"

    return page(
        title,
        Fragment(
            [
                h("h2", None, title),
                h("a", {"href": "/daily"}, "< back to list"),
                h("main", {"class": "prose"}, Markup(body)),
                nav_row,
            ]
        ),
        cfg,
    )


def page(title: str, content, cfg: dict) -> Element:
    """Wrap page content in the shell shared by every page."""
    site_title = cfg.get("site_title", "Caterpillar")

    return h(
        "html",
        {"lang": "en"},
        h(
            "head",
            None,
            h("title", None, Text(f"{title} - {site_title}")),
            h("meta", {"charset": "UTF-8"}),
            h("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1"}),
            h("link", {"href": "/style.css", "rel": "stylesheet"}),
        ),
        h(
            "body",
            {"class": "max-w-xl mx-auto p-2"},
            h("header", None, h("h1", None, site_title)),
            h("main", None, content),
        ),
    )
