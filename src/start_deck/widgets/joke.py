"""Chuck Norris joke widget using api.chucknorris.io."""

from typing import Any, Dict

from pydantic import BaseModel

from ..core.base_widget import FetchingWidget

JOKE_URL = "https://api.chucknorris.io/jokes/random"


class JokePayload(BaseModel):
    value: str


class JokeWidget(FetchingWidget):
    """Displays one random joke, replaced on every request."""

    kind = "joke"

    def fetch_data(self) -> str:
        data = self.client.get(JOKE_URL)
        joke = JokePayload.model_validate(data).value
        print("✅ Fetched a Chuck Norris joke")
        return joke

    def view(self, state: Any) -> Dict[str, Any]:
        return {"items": [state.joke] if state.joke else []}
