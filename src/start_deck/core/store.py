"""Persisted key-value store standing in for browser local storage."""

import json
from pathlib import Path
from typing import Dict, Iterator, Optional


class KeyValueStore:
    """String-keyed, string-valued store mirrored to a JSON file.

    Every write replaces the whole file (last write wins). Without a path the
    store lives in memory only, which is what one page session without a
    profile looks like.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else None
        self.items: Dict[str, str] = {}
        self.load()

    def load(self):
        """Load entries from disk. Unreadable content loads as empty."""
        self.items = {}
        if self.path is None or not self.path.exists():
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"⚠️  Failed to load store {self.path}: {e}")
            return

        if not isinstance(data, dict):
            print(f"⚠️  Ignoring store {self.path}: expected a JSON object")
            return

        # Local storage only ever holds strings
        self.items = {
            str(k): v if isinstance(v, str) else json.dumps(v)
            for k, v in data.items()
        }

    def save(self):
        """Write all entries to disk. A failed write keeps the in-memory values."""
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.items, f, indent=2, ensure_ascii=False)
        except OSError as e:
            print(f"❌ Failed to save store {self.path}: {e}")

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str):
        self.items[key] = str(value)
        self.save()

    def remove_item(self, key: str):
        if self.items.pop(key, None) is not None:
            self.save()

    def clear(self):
        self.items.clear()
        self.save()

    def keys(self) -> Iterator[str]:
        return iter(list(self.items))

    def __contains__(self, key: object) -> bool:
        return key in self.items

    def __len__(self) -> int:
        return len(self.items)
