"""Modal dialogs and the forms they contain."""

from typing import Callable, Dict, List, Optional, Tuple

LINK_MODAL = "link-modal"
CITY_MODAL = "city-modal"
LINK_FORM = "link-form"
CITY_FORM = "city-form"

# form id -> (owning modal id, field names)
FORMS: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    LINK_FORM: (LINK_MODAL, ("link-title", "link-url")),
    CITY_FORM: (CITY_MODAL, ("city-input",)),
}

FormHandler = Callable[[Dict[str, str]], None]


class ModalController:
    """Shows and hides modals and routes form submissions.

    Every modal is either hidden or visible. Submitting a form always closes
    its modal and clears its fields, whatever the handler did.
    """

    def __init__(self, handlers: Optional[Dict[str, FormHandler]] = None):
        self.visible: Dict[str, bool] = {modal_id: False for modal_id, _ in FORMS.values()}
        self.fields: Dict[str, Dict[str, str]] = {
            form_id: {name: "" for name in names} for form_id, (_, names) in FORMS.items()
        }
        self.handlers: Dict[str, FormHandler] = dict(handlers or {})
        self.transitions: List[Tuple[str, bool]] = []

    def _set(self, modal_id: str, show: bool):
        if modal_id not in self.visible:
            raise KeyError(f"Unknown modal: {modal_id}")
        self.visible[modal_id] = show
        self.transitions.append((modal_id, show))

    def open(self, modal_id: str):
        self._set(modal_id, True)

    def close(self, modal_id: str):
        self._set(modal_id, False)

    def is_visible(self, modal_id: str) -> bool:
        if modal_id not in self.visible:
            raise KeyError(f"Unknown modal: {modal_id}")
        return self.visible[modal_id]

    def fill(self, form_id: str, name: str, value: str):
        """Type a value into a form field."""
        form = self._form(form_id)
        if name not in form:
            raise KeyError(f"Unknown field {name!r} in form {form_id}")
        form[name] = value

    def submit(self, form_id: str, values: Optional[Dict[str, str]] = None):
        """Submit a form: dispatch, then close its modal and reset it.

        Args:
            form_id: "link-form" or "city-form"
            values: Field values; defaults to what was typed with fill()
        """
        form = self._form(form_id)
        submitted = dict(form)
        if values:
            submitted.update(values)

        modal_id = FORMS[form_id][0]
        try:
            handler = self.handlers.get(form_id)
            if handler is not None:
                handler(submitted)
        finally:
            self.close(modal_id)
            self.reset(form_id)

    def reset(self, form_id: str):
        form = self._form(form_id)
        for name in form:
            form[name] = ""

    def _form(self, form_id: str) -> Dict[str, str]:
        if form_id not in self.fields:
            raise KeyError(f"Unknown form: {form_id}")
        return self.fields[form_id]
