"""Trip planner for the Wiener Linien routing API."""
