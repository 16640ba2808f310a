"""Link registry: the user's ordered list of shortcuts."""

import json
from typing import List

from pydantic import BaseModel, TypeAdapter, ValidationError

from .store import KeyValueStore

LINKS_KEY = "links"


class LinkRecord(BaseModel):
    """A user-added shortcut with a display title and target url."""

    title: str
    url: str

    class Config:
        frozen = True  # Records are replaced, never edited


_link_list = TypeAdapter(List[LinkRecord])


class LinkRegistry:
    """Ordered list of links mirrored in full to the store on every change.

    The in-memory list is the source of truth for the session; the store is
    read once here and overwritten wholesale afterwards.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.records: List[LinkRecord] = self.load_all()

    def load_all(self) -> List[LinkRecord]:
        """Return the persisted links, or [] if absent or malformed."""
        raw = self.store.get_item(LINKS_KEY)
        if raw is None:
            return []
        try:
            return _link_list.validate_json(raw)
        except ValidationError as e:
            print(f"⚠️  Ignoring stored links, unexpected shape: {e.error_count()} error(s)")
            return []

    def add(self, title: str, url: str) -> LinkRecord:
        """Append a link. Neither field is validated; duplicates are allowed."""
        record = LinkRecord(title=title, url=url)
        self.records.append(record)
        self._persist()
        return record

    def remove(self, url: str) -> bool:
        """Remove the first link with this url.

        Returns:
            True if a record was removed. The list is persisted either way.
        """
        removed = False
        for index, record in enumerate(self.records):
            if record.url == url:
                del self.records[index]
                removed = True
                break
        self._persist()
        return removed

    def _persist(self):
        self.store.set_item(
            LINKS_KEY,
            json.dumps([record.model_dump() for record in self.records], ensure_ascii=False),
        )

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(list(self.records))
