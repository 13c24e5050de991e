"""Fixed per-question axis weight table.

Each question position (1-15) maps to zero or more ``AxisWeightEntry``
objects.  An entry names the axis letter the question's answer pushes
toward and how strongly.  Question 4 is the only question that feeds two
axes (I and J).

Axis pairs, in type-code order::

    (E, I)  (N, S)  (T, F)  (P, J)

The first letter of each pair is the *primary* letter: it is also the
default when the two accumulators tie.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------

AXIS_PAIRS: tuple[tuple[str, str], ...] = (
    ("E", "I"),
    ("N", "S"),
    ("T", "F"),
    ("P", "J"),
)
AXIS_LETTERS: tuple[str, ...] = tuple(letter for pair in AXIS_PAIRS for letter in pair)
PRIMARY_LETTERS = frozenset(pair[0] for pair in AXIS_PAIRS)
OPPOSITE_LETTERS = frozenset(pair[1] for pair in AXIS_PAIRS)


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AxisWeightEntry:
    """One (axis letter, weight) contribution of a question.

    Compares equal to its dict form, so ``entry == {"axis": "E", "weight": 1.0}``.
    """

    axis: str
    weight: float

    def __post_init__(self) -> None:
        if self.axis not in AXIS_LETTERS:
            raise ValueError(f"Unknown axis letter: {self.axis!r}")
        if not self.weight > 0:
            raise ValueError(f"Weight must be positive, got {self.weight!r}")

    @property
    def is_primary(self) -> bool:
        return self.axis in PRIMARY_LETTERS

    def to_dict(self) -> dict[str, Any]:
        return {"axis": self.axis, "weight": self.weight}

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AxisWeightEntry):
            return (self.axis, self.weight) == (other.axis, other.weight)
        if isinstance(other, Mapping):
            return dict(other) == self.to_dict()
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.axis, self.weight))


def _entries(*pairs: tuple[str, float]) -> tuple[AxisWeightEntry, ...]:
    return tuple(AxisWeightEntry(axis, weight) for axis, weight in pairs)


# ---------------------------------------------------------------------------
# Weight table (read-only)
# ---------------------------------------------------------------------------

WEIGHT_TABLE: Mapping[int, tuple[AxisWeightEntry, ...]] = MappingProxyType({
    1: _entries(("E", 1.0)),               # talks with teammates first
    2: _entries(("E", 1.0)),               # speaks up in meetings
    3: _entries(("E", 1.0)),               # team mood-maker
    4: _entries(("I", 0.7), ("J", 0.3)),   # thinks alone before speaking
    5: _entries(("N", 1.0)),               # tries new approaches
    6: _entries(("N", 1.0)),               # values future potential
    7: _entries(("T", 1.0)),               # logic first
    8: _entries(("T", 1.0)),               # objective criteria
    9: _entries(("F", 1.0)),               # team harmony
    10: _entries(("N", 1.0)),              # grows ideas
    11: _entries(("F", 1.0)),              # weighs feelings
    12: _entries(("F", 1.0)),              # seeks consensus
    13: _entries(("P", 1.0)),              # adapts on the fly
    14: _entries(("S", 1.0)),              # proven methods, data
    15: _entries(("P", 1.0)),              # polish over deadline
})


def get_question_weight(position: Any) -> list[AxisWeightEntry]:
    """Return the weight entries registered for a 1-based question position.

    Unknown positions (out of range, non-integer, bool) yield an empty list.
    Never raises.
    """
    if isinstance(position, bool) or not isinstance(position, int):
        return []
    return list(WEIGHT_TABLE.get(position, ()))


def check_axis_coverage(
    table: Mapping[int, tuple[AxisWeightEntry, ...]] = WEIGHT_TABLE,
) -> list[str]:
    """Return axis letters that no question in ``table`` contributes to.

    An uncovered letter means its axis degenerates to the tie-break default
    for most inputs.  The shipped table returns an empty list.
    """
    covered = {entry.axis for entries in table.values() for entry in entries}
    return [letter for letter in AXIS_LETTERS if letter not in covered]
