"""Tournament rounds and the ordered collection of them."""

import re
from datetime import date
from functools import cached_property


class Round:
    def __init__(self, data: dict):
        self._data = data

    @property
    def id(self):
        return self._data.get('id')

    @property
    def name(self) -> str | None:
        return self._data.get('name')

    @property
    def number(self) -> int | None:
        """First number in the round name: 'R2' -> 2, 'Round 3' -> 3."""
        if not self.name:
            return None
        match = re.search(r'\d+', str(self.name))
        return int(match.group(0)) if match else None

    @cached_property
    def date(self):
        """The round date as a datetime.date, or the raw value if it is not ISO formatted."""
        value = self._data.get('date')
        if not isinstance(value, str) or not value.strip():
            return value
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return value

    @property
    def in_progress(self) -> bool:
        return bool(self._data.get('in_progress'))

    @property
    def is_playing(self) -> bool:
        return self.in_progress

    @property
    def is_complete(self) -> bool:
        return not self.in_progress

    def to_dict(self) -> dict:
        return self._data

    def __repr__(self):
        return f"Round(id={self.id!r}, name={self.name!r})"


class Rounds:
    """Rounds in tournament order."""

    def __init__(self, rounds_data: list[dict]):
        self._rounds = [Round(r) for r in rounds_data or []]

    @property
    def current(self) -> Round | None:
        """The first round in progress, or None between rounds."""
        return next((r for r in self._rounds if r.is_playing), None)

    @property
    def first(self) -> Round | None:
        return self._rounds[0] if self._rounds else None

    @property
    def last(self) -> Round | None:
        return self._rounds[-1] if self._rounds else None

    def find(self, round_id) -> Round | None:
        return next((r for r in self._rounds if r.id == round_id), None)

    def __len__(self):
        return len(self._rounds)

    def __iter__(self):
        return iter(self._rounds)

    def __getitem__(self, index):
        return self._rounds[index]

    def to_list(self) -> list[dict]:
        return [r.to_dict() for r in self._rounds]
