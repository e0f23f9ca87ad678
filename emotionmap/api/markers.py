"""Marker API endpoints."""

import logging
from typing import Any, Dict, List

from litestar import Controller, get, post
from litestar.status_codes import HTTP_200_OK
from pydantic import BaseModel

from emotionmap.storage import EmotionStore, Stats
from emotionmap.validation import validate_marker

logger = logging.getLogger("EmotionMap.markers")


# --- Response Schemas ---

class MarkerItem(BaseModel):
    """Marker as returned to the map."""
    id: int
    lat: float
    lng: float
    emotion: str
    comment: str

    class Config:
        from_attributes = True


class MarkerCreated(BaseModel):
    """Response after storing a marker."""
    id: int


# --- Controller ---

class MarkersController(Controller):
    """API endpoints for emotion markers and their statistics."""

    path = "/api"
    tags = ["markers"]

    @get("/markers")
    async def list_markers(self, store: EmotionStore) -> List[MarkerItem]:
        """Get every marker."""
        markers = await store.list_markers()
        return [MarkerItem.model_validate(m) for m in markers]

    @post("/markers", status_code=HTTP_200_OK)
    async def create_marker(self, data: Dict[str, Any], store: EmotionStore) -> MarkerCreated:
        """Store a new marker."""
        marker = validate_marker(data)
        marker_id = await store.insert_marker(marker)
        logger.info(f"Marker {marker_id} saved ({marker.emotion})")
        return MarkerCreated(id=marker_id)

    @get("/stats")
    async def get_stats(self, store: EmotionStore) -> Stats:
        """Get aggregate marker statistics for the landing page."""
        return await store.compute_stats()
