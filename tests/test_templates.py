"""Template generator output is fixed text."""

from fitcsv.templates import generate_exercise_csv_template, generate_workout_csv_template

EXERCISE_TEMPLATE = """name,category,description
"Push-ups","arms","Standard push-ups for chest and arms"
"Squats","legs","Bodyweight squats for legs"
"Plank","abs","Core stability exercise"
"Pull-ups","back","Upper body pulling exercise\""""


def test_exercise_template_literal() -> None:
    assert generate_exercise_csv_template() == EXERCISE_TEMPLATE


def test_workout_template_shape() -> None:
    lines = generate_workout_csv_template().split("\n")
    assert lines[0] == "date,exerciseName,exerciseCategory,setNumber,reps,setNotes,workoutNotes"
    assert lines[1] == '"2024-01-15","Push-ups","arms","1","15","Felt strong","Great morning workout"'
    assert lines[-1] == '"2024-01-16","Plank","abs","2","25","Shorter hold","Quick abs session"'
    assert len(lines) == 8


def test_templates_are_stable() -> None:
    assert generate_workout_csv_template() == generate_workout_csv_template()
    assert not generate_exercise_csv_template().endswith("\n")
