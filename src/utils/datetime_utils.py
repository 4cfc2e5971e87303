"""Helpers for comparing naive and timezone-aware datetimes."""

from datetime import datetime


def is_aware(instant: datetime) -> bool:
    return instant.tzinfo is not None and instant.utcoffset() is not None


def align_to(instant: datetime, reference: datetime) -> datetime:
    """Express ``instant`` in the naive/aware convention of ``reference``.

    Naive datetimes are read as local wall-clock time:

    * naive instant, aware reference: the instant takes the reference zone;
    * aware instant, naive reference: the instant is converted to local time
      and its zone dropped;
    * both aware: the instant is converted to the reference zone.

    Args:
        instant: Datetime to align.
        reference: Datetime whose convention wins.

    Returns:
        datetime: Aligned instant; naive instants with a naive reference are
        returned unchanged.
    """
    if is_aware(reference):
        if is_aware(instant):
            return instant.astimezone(reference.tzinfo)
        return instant.replace(tzinfo=reference.tzinfo)
    if is_aware(instant):
        return instant.astimezone().replace(tzinfo=None)
    return instant


__all__ = ["is_aware", "align_to"]
