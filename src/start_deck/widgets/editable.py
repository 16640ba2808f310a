"""User-editable text widgets: the dashboard title and the notes area."""

from typing import Any, Dict

from ..core.base_widget import BaseWidget

DEFAULT_TITLE = "My Dashboard"


class TitleWidget(BaseWidget):
    kind = "title"

    def view(self, state: Any) -> Dict[str, Any]:
        # An empty stored title counts as no title
        return {"text": state.title or DEFAULT_TITLE}


class NotesWidget(BaseWidget):
    kind = "notes"

    def view(self, state: Any) -> Dict[str, Any]:
        return {"text": state.notes or "", "placeholder": "Write your notes here..."}
