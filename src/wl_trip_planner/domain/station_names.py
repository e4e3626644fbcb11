"""Station name normalization."""

CITY_PREFIX = "Wien "


def strip_city_prefix(name: str) -> str:
    """Remove a leading "Wien " from a stop name.

    The routing API reports stop names with the city in front
    ("Wien Karlsplatz") while the station table lists bare platform names.
    """
    if name.startswith(CITY_PREFIX):
        return name[len(CITY_PREFIX) :]
    return name
