"""Pydantic models for fitcsv: domain records, transient CSV rows, and tool inputs/outputs."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """camelCase on the wire (matches the app's entity shapes), snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(str, Enum):
    ABS = "abs"
    LEGS = "legs"
    ARMS = "arms"
    BACK = "back"
    SHOULDERS = "shoulders"
    CHEST = "chest"
    CARDIO = "cardio"
    FULL_BODY = "full-body"


# --- Domain records ---

class Exercise(_Record):
    id: str
    name: str
    category: Category
    description: Optional[str] = None
    created_at: dt.datetime

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.strip().lower()


class WorkoutSet(_Record):
    id: str
    exercise_id: str  # reference only; the Exercise is owned by the catalog
    reps: int = Field(ge=0)
    notes: Optional[str] = None


class Workout(_Record):
    id: str
    date: dt.date
    sets: list[WorkoutSet] = Field(default_factory=list)
    notes: Optional[str] = None


# --- Transient CSV rows ---

class ExerciseCSVRow(_Record):
    name: str = Field(min_length=1)
    category: Category
    description: Optional[str] = None


class WorkoutCSVRow(_Record):
    """One workout data line, raw strings before validation."""
    date: str = ""
    exercise_name: str = ""
    exercise_category: Optional[str] = None
    set_number: str = ""
    reps: str = ""
    set_notes: Optional[str] = None
    workout_notes: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.date and self.exercise_name and self.reps and self.set_number)


# --- Import results ---

class IssueRecord(BaseModel):
    severity: Literal["warning", "blocking"]
    type: str
    location: str
    message: str
    raw_excerpt: Optional[str] = None


class ExerciseImportResult(_Record):
    exercises: list[ExerciseCSVRow] = Field(default_factory=list)
    issues: list[IssueRecord] = Field(default_factory=list)


class WorkoutImportResult(_Record):
    workouts: list[Workout] = Field(default_factory=list)
    new_exercises: list[Exercise] = Field(default_factory=list)
    issues: list[IssueRecord] = Field(default_factory=list)


# --- Tool inputs/outputs ---

class ImportExercisesInput(_Record):
    content: str


class ImportWorkoutsInput(_Record):
    content: str
    exercises: list[Exercise] = Field(default_factory=list)  # caller's current catalog


class ImportExercisesOutput(_Record):
    status: Literal["ok", "error"]
    exercises: list[ExerciseCSVRow] = Field(default_factory=list)
    issues: list[IssueRecord] = Field(default_factory=list)


class ImportWorkoutsOutput(_Record):
    status: Literal["ok", "error"]
    workouts: list[Workout] = Field(default_factory=list)
    new_exercises: list[Exercise] = Field(default_factory=list)
    issues: list[IssueRecord] = Field(default_factory=list)
