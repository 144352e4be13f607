"""Watch-mode form state: the three raw field values as typed so far."""

from __future__ import annotations

from dataclasses import dataclass, replace

from agecalc.domain.errors import DateField


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable copy of the raw fields, handed to the recalculation."""

    day: str = ""
    month: str = ""
    year: str = ""

    @property
    def is_complete(self) -> bool:
        """All three fields have some input (valid or not)."""
        return all(v.strip() for v in (self.day, self.month, self.year))


class AgeForm:
    """Holds raw day/month/year input between edits.

    Values are kept as the raw strings the user typed; parsing and
    validation happen in AgeService on every recalculation.
    """

    def __init__(self) -> None:
        self._snapshot = FormSnapshot()

    @property
    def snapshot(self) -> FormSnapshot:
        return self._snapshot

    def update(self, field: DateField | str, value: str) -> FormSnapshot:
        """Set one field and return the new snapshot.

        Raises:
            ValueError: *field* is not day, month or year.
        """
        name = DateField(field).value
        self._snapshot = replace(self._snapshot, **{name: value})
        return self._snapshot

    def reset(self) -> FormSnapshot:
        self._snapshot = FormSnapshot()
        return self._snapshot
