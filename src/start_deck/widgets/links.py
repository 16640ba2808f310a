"""Link list widget."""

from typing import Any, Dict

from ..core.base_widget import BaseWidget
from ..core.links import LinkRecord
from ..core.utils import get_favicon_url


class LinksWidget(BaseWidget):
    """Displays the user's links with favicon, label and delete control."""

    kind = "links"

    def __init__(self, favicon_size: int = 256):
        self.favicon_size = favicon_size

    def link_view(self, record: LinkRecord) -> Dict[str, Any]:
        return {
            "title": record.title,
            "url": record.url,
            "favicon_url": get_favicon_url(record.url, self.favicon_size),
            "target": "_blank",
            "delete_url": record.url,
        }

    def view(self, state: Any) -> Dict[str, Any]:
        return {"items": [self.link_view(record) for record in state.links]}
