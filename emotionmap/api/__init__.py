"""EmotionMap API routes."""

from emotionmap.api.markers import MarkersController
from emotionmap.api.contact import ContactController
from emotionmap.api.admin import AdminController
from emotionmap.api.health import health

__all__ = ["MarkersController", "ContactController", "AdminController", "health"]
