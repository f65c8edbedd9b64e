"""Exercise CSV import: header tolerance, skip rules, category leniency, fatal errors."""

import logging

import pytest

from fitcsv import CSVImportError, import_exercises, parse_exercises_csv
from fitcsv.models import Category
from fitcsv.templates import generate_exercise_csv_template


def test_template_round_trip() -> None:
    rows = import_exercises(generate_exercise_csv_template())
    assert [r.name for r in rows] == ["Push-ups", "Squats", "Plank", "Pull-ups"]
    assert [r.category for r in rows] == [Category.ARMS, Category.LEGS, Category.ABS, Category.BACK]
    assert rows[0].description == "Standard push-ups for chest and arms"


def test_one_row_per_named_line_and_blank_names_skipped() -> None:
    """Rows with an empty name and blank lines produce nothing and are not errors."""
    content = """Exercise Name,Muscle Group,Notes
Bench Press,Chest,
,arms,orphan description

Deadlift,back,
   ,,
"""
    rows = import_exercises(content)
    assert [r.name for r in rows] == ["Bench Press", "Deadlift"]
    assert rows[0].category is Category.CHEST


def test_synonym_categories_and_header_variants() -> None:
    content = "NAME,Type,Desc\nCrunch,Core,Floor work\nCurl,biceps,\nRow,LATS,Cable\n"
    rows = import_exercises(content)
    assert [r.category for r in rows] == [Category.ABS, Category.ARMS, Category.BACK]
    assert rows[0].description == "Floor work"
    assert rows[1].description is None


def test_missing_description_column_gives_none() -> None:
    rows = import_exercises("name,category\nPlank,abs")
    assert len(rows) == 1
    assert rows[0].description is None


def test_unknown_category_defaults_to_full_body_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    content = "name,category\nBurpee,plyometrics\nLunge,legs\n"
    with caplog.at_level(logging.WARNING, logger="fitcsv.ingest"):
        result = parse_exercises_csv(content)
    assert [r.category for r in result.exercises] == [Category.FULL_BODY, Category.LEGS]
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.severity == "warning"
    assert issue.type == "unknown_category"
    assert issue.location == "line 2"
    assert issue.raw_excerpt == "plyometrics"
    assert "plyometrics" in caplog.text and "line 2" in caplog.text


def test_short_row_missing_category_value() -> None:
    """A row that stops before the category column still imports, as full-body."""
    result = parse_exercises_csv("name,description,category\nWall sit,Isometric\n")
    assert result.exercises[0].category is Category.FULL_BODY
    assert result.exercises[0].description == "Isometric"
    assert result.issues[0].type == "unknown_category"


def test_quoted_names_with_commas() -> None:
    rows = import_exercises('name,category,description\n"Row, seated","back","Cable ""V"" handle"\n')
    assert rows[0].name == "Row, seated"
    assert rows[0].description == 'Cable "V" handle'


def test_fewer_than_two_lines_is_fatal() -> None:
    with pytest.raises(CSVImportError, match="at least a header row and one data row"):
        import_exercises("name,category\n")
    with pytest.raises(CSVImportError):
        import_exercises("")


def test_missing_category_column_is_fatal() -> None:
    with pytest.raises(CSVImportError) as exc:
        import_exercises("Name,Description\nPlank,Core hold\n")
    assert '"category"' in str(exc.value)
    assert "name, description" in str(exc.value)


def test_missing_name_column_is_fatal() -> None:
    with pytest.raises(CSVImportError, match='"name" column'):
        import_exercises("title,category\nPlank,abs\n")


def test_crlf_line_endings() -> None:
    rows = import_exercises("name,category\r\nPlank,abs\r\nSquat,legs\r\n")
    assert [r.name for r in rows] == ["Plank", "Squat"]
