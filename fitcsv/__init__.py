"""fitcsv: tolerant CSV import of exercises and workouts."""

from .errors import CSVImportError
from .ingest import import_exercises, import_workouts, parse_exercises_csv
from .models import (
    Category,
    Exercise,
    ExerciseCSVRow,
    Workout,
    WorkoutImportResult,
    WorkoutSet,
)
from .templates import generate_exercise_csv_template, generate_workout_csv_template

__all__ = [
    "CSVImportError",
    "Category",
    "Exercise",
    "ExerciseCSVRow",
    "Workout",
    "WorkoutImportResult",
    "WorkoutSet",
    "generate_exercise_csv_template",
    "generate_workout_csv_template",
    "import_exercises",
    "import_workouts",
    "parse_exercises_csv",
]
