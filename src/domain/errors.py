"""Domain errors raised by the reporting engine."""


class ReportingError(Exception):
    """Base class for reporting failures."""


class StorageUnavailableError(ReportingError):
    """The record store could not be read; the caller may retry."""


class InvalidSelectionError(ReportingError):
    """A specific week id is not part of the current available-week list.

    Attributes:
        week_id: The requested week sequence number, or None when no week
            exists at all.
    """

    def __init__(self, week_id: int | None) -> None:
        if week_id is None:
            message = "No weeks are available to select."
        else:
            message = (
                f"Week {week_id} is not in the available weeks; "
                "reload the week list and select again."
            )
        super().__init__(message)
        self.week_id = week_id


__all__ = [
    "ReportingError",
    "StorageUnavailableError",
    "InvalidSelectionError",
]
