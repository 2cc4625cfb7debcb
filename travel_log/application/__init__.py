"""Application layer modules."""

from .engine import TravelLogEngine
from .config import Config

__all__ = ["TravelLogEngine", "Config"]
