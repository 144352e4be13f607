"""Shared service-layer helper functions."""

from __future__ import annotations

import datetime


def today() -> datetime.date:
    """Today's date from the host clock, in local time."""
    return datetime.date.today()
