"""Header resolution: map arbitrary header text to semantic column roles via ordered candidate tables."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import CSVImportError


@dataclass(frozen=True)
class HeaderRole:
    """
    One semantic column. `exact` names are tried first, in order, against the compacted header
    (no whitespace, '_' or '-'); then each tuple in `markers` is tried as a substring fallback
    where every word must appear in the header.
    """
    name: str
    required: bool
    exact: tuple[str, ...]
    markers: tuple[tuple[str, ...], ...] = ()


EXERCISE_ROLES: tuple[HeaderRole, ...] = (
    HeaderRole("name", True, ("name", "exercise", "exercisename"), (("name",),)),
    HeaderRole("description", False, ("description", "desc"), (("description",),)),
    HeaderRole(
        "category", True,
        ("category", "type", "musclegroup", "bodypart"),
        (("category",),),
    ),
)

WORKOUT_ROLES: tuple[HeaderRole, ...] = (
    HeaderRole("date", True, ("date", "workoutdate", "day"), (("date",),)),
    HeaderRole("exerciseName", True, ("exercisename", "exercise"), (("exercise", "name"),)),
    HeaderRole(
        "exerciseCategory", False,
        ("exercisecategory", "category", "bodypart"),
        (("exercise", "category"),),
    ),
    HeaderRole(
        "setNumber", True,
        ("setnumber", "set", "setorder", "setno"),
        (("set", "number"),),
    ),
    HeaderRole("reps", True, ("reps", "repetitions", "rep"), (("reps",),)),
    HeaderRole("setNotes", False, ("setnotes", "notes", "comment"), (("set", "notes"),)),
    HeaderRole("workoutNotes", False, ("workoutnotes",), (("workout", "notes"),)),
)

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_headers(raw: list[str]) -> list[str]:
    return [h.strip().lower() for h in raw]


def _compact(header: str) -> str:
    return _SEPARATORS.sub("", header)


def find_column(headers: list[str], role: HeaderRole) -> int:
    """Index of the first header matching `role` in candidate priority order, or -1."""
    compacted = [_compact(h) for h in headers]
    for candidate in role.exact:
        if candidate in compacted:
            return compacted.index(candidate)
    for words in role.markers:
        for i, h in enumerate(headers):
            if all(w in h for w in words):
                return i
    return -1


def resolve_columns(headers: list[str], roles: tuple[HeaderRole, ...]) -> dict[str, int]:
    """
    Resolve every role against the (lower-cased, trimmed) header row.
    Raises CSVImportError naming the first unresolved required role and listing the headers found.
    """
    columns: dict[str, int] = {}
    for role in roles:
        idx = find_column(headers, role)
        if idx == -1 and role.required:
            article = "an" if role.name[0] in "aeiou" else "a"
            raise CSVImportError(
                f'CSV must have {article} "{role.name}" column. Found headers: {", ".join(headers)}',
                headers=headers,
            )
        columns[role.name] = idx
    return columns
