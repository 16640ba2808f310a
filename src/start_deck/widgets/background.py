"""Background image widget using the Unsplash random photo API."""

from typing import Any, Dict

from pydantic import BaseModel

from ..core.base_widget import FetchingWidget

UNSPLASH_URL = "https://api.unsplash.com/photos/random"


class _PhotoUrls(BaseModel):
    full: str


class UnsplashPhotoPayload(BaseModel):
    urls: _PhotoUrls


class BackgroundWidget(FetchingWidget):
    """Full-page background photo.

    Optional params:
        - unsplash_key: Unsplash client_id
    """

    kind = "background"

    def fetch_data(self) -> str:
        data = self.client.get(UNSPLASH_URL, params={"client_id": self.params.get("unsplash_key", "")})
        image_url = UnsplashPhotoPayload.model_validate(data).urls.full
        print("✅ Fetched a new background image")
        return image_url

    def view(self, state: Any) -> Dict[str, Any]:
        image = state.background_image
        return {
            "image_url": image,
            "style": f"background-image: url({image})" if image else "",
        }
