"""Wiener Linien routing API adapters."""

from wl_trip_planner.adapters.wl_routing_api.http_client import WlRoutingHttpClient
from wl_trip_planner.adapters.wl_routing_api.itinerary_parser import ItineraryParser
from wl_trip_planner.adapters.wl_routing_api.trip_repository import WlTripRepository

__all__ = ["ItineraryParser", "WlRoutingHttpClient", "WlTripRepository"]
