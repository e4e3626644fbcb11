"""Constants for the Wiener Linien routing API adapter.

Uses the open data EFA endpoint XML_TRIP_REQUEST2.
No authentication required.
"""

# Stops are addressed by their DIVA number
STOP_ID_TYPE = "stopID"
OUTPUT_FORMAT = "XML"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/xml, text/xml",
}

# Minimum delay between trip requests (in seconds)
ROUTING_API_MIN_DELAY_SECONDS = 0.5
