"""EmotionMap: geo-tagged emotion markers and visitor contact messages."""

__version__ = "1.0.0"
