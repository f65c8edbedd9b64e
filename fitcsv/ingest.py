"""Import workflow: tokenize, resolve headers, validate rows, reconcile exercises, group workouts. Stateless."""

from __future__ import annotations

import datetime as dt
import logging
import uuid
from typing import Callable, NamedTuple, Optional

from .errors import CSVImportError
from .headers import EXERCISE_ROLES, WORKOUT_ROLES, normalize_headers, resolve_columns
from .models import (
    Category,
    Exercise,
    ExerciseCSVRow,
    ExerciseImportResult,
    ImportExercisesInput,
    ImportExercisesOutput,
    ImportWorkoutsInput,
    ImportWorkoutsOutput,
    IssueRecord,
    Workout,
    WorkoutCSVRow,
    WorkoutImportResult,
    WorkoutSet,
)
from .normalize import is_known_category, normalize_category, parse_date, parse_int
from .tokenize import parse_csv_line, split_lines

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
Clock = Callable[[], dt.datetime]


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def _read_table(content: str) -> tuple[list[str], list[str]]:
    """Return (normalized headers, all lines). Line i of the list is line i + 1 of the file."""
    lines = split_lines(content or "")
    if len(lines) < 2:
        raise CSVImportError("CSV must have at least a header row and one data row")
    headers = normalize_headers(parse_csv_line(lines[0]))
    return headers, lines


def _field(values: list[str], index: int) -> str:
    if index < 0 or index >= len(values):
        return ""
    return values[index].strip()


def _unknown_category_issue(raw: str, line_no: int) -> IssueRecord:
    logger.warning("Unknown category %r on line %d, defaulting to 'full-body'", raw, line_no)
    return IssueRecord(
        severity="warning",
        type="unknown_category",
        location=f"line {line_no}",
        message=f'Unknown category "{raw}" on line {line_no}; using "full-body".',
        raw_excerpt=raw,
    )


# --- Exercises ---

def parse_exercises_csv(content: str) -> ExerciseImportResult:
    """
    Parse an exercise CSV (name + category columns, optional description).
    Blank lines and rows without a name are skipped; unknown categories become full-body with a warning issue.
    Raises CSVImportError when the file is too short or a required column is missing.
    """
    headers, lines = _read_table(content)
    columns = resolve_columns(headers, EXERCISE_ROLES)
    logger.debug("Exercise CSV headers %s resolved to %s", headers, columns)

    exercises: list[ExerciseCSVRow] = []
    issues: list[IssueRecord] = []
    for i, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        values = parse_csv_line(line)
        name = _field(values, columns["name"])
        if not name:
            logger.debug("Skipping line %d: no name", i)
            continue
        raw_category = _field(values, columns["category"]).lower()
        if not is_known_category(raw_category):
            issues.append(_unknown_category_issue(raw_category, i))
        description = _field(values, columns["description"])
        exercises.append(ExerciseCSVRow(
            name=name,
            category=normalize_category(raw_category),
            description=description or None,
        ))

    logger.debug("Parsed %d exercises from %d lines", len(exercises), len(lines) - 1)
    return ExerciseImportResult(exercises=exercises, issues=issues)


def import_exercises(content: str) -> list[ExerciseCSVRow]:
    """Parse an exercise CSV into rows. Raises CSVImportError on fatal input errors."""
    return parse_exercises_csv(content).exercises


# --- Workouts ---

class _PendingSet(NamedTuple):
    exercise_id: str
    reps: int
    notes: Optional[str]
    set_number: int


class _Day:
    def __init__(self, date: dt.date):
        self.date = date
        self.sets: list[_PendingSet] = []
        self.notes: Optional[str] = None


def _read_workout_row(values: list[str], columns: dict[str, int]) -> WorkoutCSVRow:
    def optional(role: str) -> Optional[str]:
        return _field(values, columns[role]) or None

    return WorkoutCSVRow(
        date=_field(values, columns["date"]),
        exercise_name=_field(values, columns["exerciseName"]),
        exercise_category=optional("exerciseCategory"),
        set_number=_field(values, columns["setNumber"]),
        reps=_field(values, columns["reps"]),
        set_notes=optional("setNotes"),
        workout_notes=optional("workoutNotes"),
    )


def _order_sets(pending: list[_PendingSet]) -> list[_PendingSet]:
    """
    Group sets by exercise in first-seen order, each group sorted by set number.
    The sort is stable, so duplicate set numbers keep file order.
    """
    groups: dict[str, list[_PendingSet]] = {}
    for s in pending:
        groups.setdefault(s.exercise_id, []).append(s)
    ordered: list[_PendingSet] = []
    for group in groups.values():
        ordered.extend(sorted(group, key=lambda s: s.set_number))
    return ordered


def import_workouts(
    content: str,
    catalog: list[Exercise],
    *,
    id_factory: IdFactory | None = None,
    clock: Clock | None = None,
) -> WorkoutImportResult:
    """
    Parse a workout CSV (one row per set) into one Workout per calendar day.

    Exercise names are matched case-insensitively against `catalog` and against exercises created
    earlier in the same call; unknown names become new Exercise records returned in `new_exercises`.
    `catalog` is not modified. Ids come from `id_factory`, creation timestamps from `clock`.
    Raises CSVImportError (with the 1-indexed line number for row errors) on malformed input.
    """
    make_id = id_factory or new_id
    now = clock or utc_now

    headers, lines = _read_table(content)
    columns = resolve_columns(headers, WORKOUT_ROLES)
    logger.debug("Workout CSV headers %s resolved to %s", headers, columns)

    known: dict[str, Exercise] = {ex.key: ex for ex in catalog}
    new_exercises: list[Exercise] = []
    issues: list[IssueRecord] = []
    days: dict[dt.date, _Day] = {}

    for i, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        row = _read_workout_row(parse_csv_line(line), columns)
        if not row.is_complete():
            logger.debug("Skipping incomplete line %d", i)
            continue

        date = parse_date(row.date)
        if date is None:
            raise CSVImportError(f'Invalid date "{row.date}" on line {i}', line=i)
        reps = parse_int(row.reps)
        if reps is None or reps < 0:
            raise CSVImportError(f'Invalid reps "{row.reps}" on line {i}', line=i)
        set_number = parse_int(row.set_number)
        if set_number is None or set_number < 1:
            raise CSVImportError(
                f'Invalid set number "{row.set_number}" on line {i}. Set number must be 1 or greater.',
                line=i,
            )

        key = row.exercise_name.lower()
        exercise = known.get(key)
        if exercise is None:
            category = Category.FULL_BODY
            if row.exercise_category:
                raw_category = row.exercise_category.lower()
                if is_known_category(raw_category):
                    category = normalize_category(raw_category)
                else:
                    issues.append(_unknown_category_issue(raw_category, i))
            exercise = Exercise(
                id=make_id(),
                name=row.exercise_name,
                category=category,
                created_at=now(),
            )
            known[key] = exercise
            new_exercises.append(exercise)
            logger.debug("Created exercise %r (%s) from line %d", exercise.name, category.value, i)

        day = days.get(date)
        if day is None:
            day = days[date] = _Day(date)
        day.sets.append(_PendingSet(exercise.id, reps, row.set_notes, set_number))
        if row.workout_notes and not day.notes:
            day.notes = row.workout_notes

    workouts = [
        Workout(
            id=make_id(),
            date=day.date,
            sets=[
                WorkoutSet(id=make_id(), exercise_id=s.exercise_id, reps=s.reps, notes=s.notes)
                for s in _order_sets(day.sets)
            ],
            notes=day.notes,
        )
        for day in days.values()
    ]
    logger.debug(
        "Parsed %d workouts, %d sets, %d new exercises",
        len(workouts), sum(len(w.sets) for w in workouts), len(new_exercises),
    )
    return WorkoutImportResult(workouts=workouts, new_exercises=new_exercises, issues=issues)


# --- Tool entry points ---

def _blocking_issue(err: CSVImportError) -> IssueRecord:
    return IssueRecord(
        severity="blocking",
        type="import_error",
        location=err.location,
        message=str(err),
    )


def import_exercises_impl(payload: ImportExercisesInput) -> ImportExercisesOutput:
    """Tool wrapper: fatal errors come back as status=error with one blocking issue."""
    try:
        result = parse_exercises_csv(payload.content)
    except CSVImportError as e:
        return ImportExercisesOutput(status="error", issues=[_blocking_issue(e)])
    return ImportExercisesOutput(status="ok", exercises=result.exercises, issues=result.issues)


def import_workouts_impl(
    payload: ImportWorkoutsInput,
    id_factory: IdFactory | None = None,
    clock: Clock | None = None,
) -> ImportWorkoutsOutput:
    """Tool wrapper around import_workouts; the payload carries the caller's catalog."""
    try:
        result = import_workouts(payload.content, payload.exercises, id_factory=id_factory, clock=clock)
    except CSVImportError as e:
        return ImportWorkoutsOutput(status="error", issues=[_blocking_issue(e)])
    return ImportWorkoutsOutput(
        status="ok",
        workouts=result.workouts,
        new_exercises=result.new_exercises,
        issues=result.issues,
    )
