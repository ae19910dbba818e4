"""Exceptions raised by the analyzer."""


class PPIAnalyzerError(Exception):
    """Base class for analyzer errors."""


class NoDataLoaded(PPIAnalyzerError):
    """A query was issued before any series was loaded."""

    def __init__(self) -> None:
        super().__init__("No data loaded. Select a series first.")


class InvalidSelection(PPIAnalyzerError):
    """Menu choice does not map to a known series."""

    def __init__(self, choice: object) -> None:
        self.choice = choice
        super().__init__(f"Invalid selection: {choice!r}")


class FetchFailed(PPIAnalyzerError):
    """The data collaborator could not produce a series."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Fetch failed: {reason}")


class MalformedObservation(PPIAnalyzerError):
    """A present value that is not a finite number, or a date that is not YYYY-MM-DD."""

    def __init__(self, date: str, raw_value: object, field: str = "value") -> None:
        self.date = date
        self.raw_value = raw_value
        self.field = field
        if field == "date":
            super().__init__(f"Malformed date {raw_value!r}")
        else:
            super().__init__(f"Malformed {field} {raw_value!r} on {date}")
