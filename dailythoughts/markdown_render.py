from urllib.parse import urlsplit

import markdown  # pip install markdown
from bs4 import BeautifulSoup, Comment  # pip install beautifulsoup4

# GitHub-flavoured extras: ~~strike~~, bare URL autolinks, task lists
MARKDOWN_EXTENSIONS = [
    "fenced_code",
    "tables",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]

# Tags that survive sanitizing. Anything else is unwrapped, keeping its text.
ALLOWED_TAGS = frozenset(
    {
        "a", "abbr", "b", "blockquote", "br", "caption", "code", "dd", "del",
        "details", "div", "dl", "dt", "em", "figcaption", "figure", "h1",
        "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "ins", "kbd", "li",
        "ol", "p", "pre", "q", "s", "samp", "small", "span", "strike",
        "strong", "sub", "summary", "sup", "table", "tbody", "td", "tfoot",
        "th", "thead", "tr", "u", "ul", "audio", "video", "input",
    }
)

# Tags that are dropped together with everything inside them
DROPPED_TAGS = ("script", "style", "textarea", "option", "noscript", "iframe", "object")

ALLOWED_ATTRIBUTES = {
    "a": {"href", "name", "target", "title"},
    "img": {"src", "srcset", "alt", "title", "width", "height", "loading"},
    "audio": {"controls", "loop", "muted"},
    "video": {"controls", "loop", "muted", "width", "height", "poster"},
    "code": {"class"},
    "th": {"align", "style"},
    "td": {"align", "style"},
    "ol": {"start"},
    "ul": {"class"},
    "li": {"class"},
    "input": {"type", "disabled", "checked"},
}

URL_ATTRIBUTES = frozenset({"href", "src", "poster", "cite"})
ALLOWED_SCHEMES = frozenset({"http", "https", "mailto", "tel"})


def _safe_url(value: str) -> bool:
    try:
        scheme = urlsplit(value.strip()).scheme.lower()
    except ValueError:
        return False
    return scheme == "" or scheme in ALLOWED_SCHEMES


def sanitize_html(html_fragment: str, allowed_tags=(), allowed_attributes=None) -> str:
    """
    Strip an HTML fragment down to an allowlist of tags and attributes.

    `allowed_tags` and `allowed_attributes` extend the defaults, e.g.
    allowed_tags=["source"], allowed_attributes={"source": ["src"]} lets
    embedded media through.
    """
    tags = ALLOWED_TAGS | set(allowed_tags)
    attributes = {tag: set(names) for tag, names in ALLOWED_ATTRIBUTES.items()}
    for tag, names in (allowed_attributes or {}).items():
        attributes.setdefault(tag, set()).update(names)

    soup = BeautifulSoup(html_fragment, "html.parser")

    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    for tag in soup.find_all(list(DROPPED_TAGS)):
        if tag.decomposed:
            continue
        tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in tags:
            tag.unwrap()
            continue

        # task list checkboxes are the only form control let through
        if tag.name == "input" and tag.get("type") != "checkbox":
            tag.decompose()
            continue

        permitted = attributes.get(tag.name, set())
        for name in list(tag.attrs):
            if name not in permitted:
                del tag[name]
            elif name in URL_ATTRIBUTES and not _safe_url(tag[name]):
                del tag[name]

    return str(soup)


def render_markdown(md: str, allowed_tags=(), allowed_attributes=None) -> str:
    """Convert markdown to a sanitized HTML fragment."""
    raw_html = markdown.markdown(md, extensions=MARKDOWN_EXTENSIONS)
    return sanitize_html(raw_html, allowed_tags, allowed_attributes)
