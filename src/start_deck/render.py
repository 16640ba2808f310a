"""Apply step: turn a page view description into HTML on disk."""

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, PackageLoader, select_autoescape

_env = Environment(
    loader=PackageLoader("start_deck", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_page(view: Dict[str, Any]) -> str:
    """Render the dashboard page from a view description."""
    return _env.get_template("index.html").render(**view)


def apply(view: Dict[str, Any], output_path: Path) -> Path:
    """Render the page and write it, replacing any previous render."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_page(view), encoding="utf-8")
    return output_path
