"""Example CSV files shown to users as the expected import shape."""

from __future__ import annotations

EXERCISE_HEADERS = ("name", "category", "description")
EXERCISE_EXAMPLES = (
    ("Push-ups", "arms", "Standard push-ups for chest and arms"),
    ("Squats", "legs", "Bodyweight squats for legs"),
    ("Plank", "abs", "Core stability exercise"),
    ("Pull-ups", "back", "Upper body pulling exercise"),
)

WORKOUT_HEADERS = ("date", "exerciseName", "exerciseCategory", "setNumber", "reps", "setNotes", "workoutNotes")
WORKOUT_EXAMPLES = (
    ("2024-01-15", "Push-ups", "arms", "1", "15", "Felt strong", "Great morning workout"),
    ("2024-01-15", "Push-ups", "arms", "2", "12", "Getting tired", "Great morning workout"),
    ("2024-01-15", "Push-ups", "arms", "3", "10", "Final set", "Great morning workout"),
    ("2024-01-15", "Squats", "legs", "1", "20", "Good form", "Great morning workout"),
    ("2024-01-15", "Squats", "legs", "2", "18", "Legs burning", "Great morning workout"),
    ("2024-01-16", "Plank", "abs", "1", "30", "Held for 30 seconds", "Quick abs session"),
    ("2024-01-16", "Plank", "abs", "2", "25", "Shorter hold", "Quick abs session"),
)


def _render(headers: tuple[str, ...], rows: tuple[tuple[str, ...], ...]) -> str:
    """Bare header line, then every data field double-quoted."""
    lines = [",".join(headers)]
    lines.extend(",".join(f'"{field}"' for field in row) for row in rows)
    return "\n".join(lines)


def generate_exercise_csv_template() -> str:
    return _render(EXERCISE_HEADERS, EXERCISE_EXAMPLES)


def generate_workout_csv_template() -> str:
    return _render(WORKOUT_HEADERS, WORKOUT_EXAMPLES)
