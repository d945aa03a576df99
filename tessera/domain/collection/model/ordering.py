"""Sparse positional ordering of collection entries."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, PrivateAttr, computed_field

from tessera.domain.shared.error import ValidationError


class EntryPositions(BaseModel):
    """Maps sparse integer positions to entry identifiers.

    Positions are chosen by the caller and need not be contiguous, so an
    entry can be slotted between two others by picking any free integer in
    between. Ranks (1-based, dense) are derived on read by sorting the live
    positions.

    Invariants:
    - a position holds at most one entry
    - an entry holds at most one position
    - assigning an occupied position evicts its occupant (last write wins)

    The store is only changed through ``set_position`` and ``remove``;
    ``positions`` is a snapshot.
    """

    _positions: dict[int, str] = PrivateAttr(default_factory=dict)
    _by_entry: dict[str, int] = PrivateAttr(default_factory=dict)

    def __init__(self, positions: Mapping[int, str] | None = None, **data: Any) -> None:
        super().__init__(**data)
        for position, entry in (positions or {}).items():
            self.set_position(entry, position)

    @classmethod
    def from_mapping(cls, positions: Mapping[int, str]) -> "EntryPositions":
        return cls(positions=positions)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def positions(self) -> dict[int, str]:
        return dict(self._positions)

    def set_position(self, entry: str, position: int) -> "EntryPositions":
        if isinstance(position, bool) or not isinstance(position, int):
            raise ValidationError(
                f"Position for '{entry}' must be an integer, got {position!r}", field="position"
            )

        current = self._by_entry.get(entry)
        if current is not None and current != position:
            del self._positions[current]

        evicted = self._positions.get(position)
        if evicted is not None and evicted != entry:
            del self._by_entry[evicted]

        self._positions[position] = entry
        self._by_entry[entry] = position
        return self

    def remove(self, entry: str) -> "EntryPositions":
        position = self._by_entry.pop(entry, None)
        if position is not None:
            del self._positions[position]
        return self

    def get_position(self, entry: str) -> int | None:
        return self._by_entry.get(entry)

    def sorted_positions(self) -> dict[int, str]:
        return {position: self._positions[position] for position in sorted(self._positions)}

    def order(self) -> list[str]:
        return [self._positions[position] for position in sorted(self._positions)]

    def rank(self, entry: str) -> int | None:
        position = self._by_entry.get(entry)
        if position is None:
            return None
        return sorted(self._positions).index(position) + 1

    def __contains__(self, entry: object) -> bool:
        return entry in self._by_entry

    def __len__(self) -> int:
        return len(self._positions)
