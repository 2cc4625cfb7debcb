"""Storage for travel entries."""

from .travel_store import TravelStore, JsonTravelStore

__all__ = ["TravelStore", "JsonTravelStore"]
