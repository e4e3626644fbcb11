"""Domain errors."""


class StationNotFoundError(LookupError):
    """Raised when origin and/or destination are not in the station directory."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        if len(missing) > 1:
            message = "Beide Stationen wurden nicht gefunden"
        else:
            message = f"Station {missing[0]} wurde nicht gefunden"
        super().__init__(message)
