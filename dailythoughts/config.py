import sys
from pathlib import Path

import yaml  # pip install pyyaml

DEFAULT_INTRO = (
    "These are my daily thoughts. If you have any questions, comments, or "
    "feedback, please get in touch!"
)


def default_config(base_dir: Path = None) -> dict:
    """Return the configuration used when no config file is given."""
    base_dir = Path(base_dir or Path.cwd())
    return {
        "site_title": "Caterpillar",
        "content_root": (base_dir / "content" / "daily").resolve(),
        "static_root": (base_dir / "static").resolve(),
        # "reverse" (newest first) or "filesystem" (directory listing order)
        "order": "reverse",
        "listing_intro": DEFAULT_INTRO,
        "retired_host": "caterpillar.deno.dev",
        "canonical_origin": "https://capi.hannobraun.com/",
        "host": "127.0.0.1",
        "port": 34480,
    }


def load_config(config_path: Path = None) -> dict:
    """
    Load YAML config and apply defaults.

    Relative `content_root` and `static_root` values are resolved against the
    directory holding the config file, so the server can be started from
    anywhere. Without a config path, the defaults resolve against the current
    working directory.
    """
    if config_path is None:
        return default_config()

    config_path = Path(config_path).resolve()
    if not config_path.exists():
        print(f"Config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    base_dir = config_path.parent
    cfg = default_config(base_dir)

    for key in ("site_title", "listing_intro", "retired_host", "canonical_origin", "host"):
        if key in data:
            cfg[key] = data[key]

    for key in ("content_root", "static_root"):
        if key in data:
            cfg[key] = (base_dir / data[key]).resolve()

    if "port" in data:
        cfg["port"] = int(data["port"])

    order = data.get("order", cfg["order"])
    if order not in ("reverse", "filesystem"):
        print(
            f"Unknown order {order!r} in {config_path}, expected 'reverse' or 'filesystem'",
            file=sys.stderr,
        )
        sys.exit(1)
    cfg["order"] = order

    # listing_intro may be switched off with an empty value
    if cfg["listing_intro"] is None:
        cfg["listing_intro"] = ""

    return cfg
