"""MCP server: fitcsv.import_exercises, fitcsv.import_workouts, and CSV template tools/resources."""

from __future__ import annotations

import logging
import os

from fastmcp import FastMCP

from .ingest import import_exercises_impl, import_workouts_impl
from .models import ImportExercisesInput, ImportWorkoutsInput
from .templates import generate_exercise_csv_template, generate_workout_csv_template

logger = logging.getLogger(__name__)

mcp = FastMCP(name=os.environ.get("FITCSV_SERVER_NAME", "fitcsv"))


@mcp.tool(name="fitcsv.import_exercises")
def fitcsv_import_exercises(payload: dict) -> dict:
    """
    Import exercise definitions from CSV text (header row + one row per exercise).
    Needs a name-like and a category-like column; description is optional.
    Returns { status, exercises, issues }. Fatal input errors give status=error with a blocking issue.
    """
    inp = ImportExercisesInput.model_validate(payload)
    result = import_exercises_impl(inp)
    return result.model_dump(by_alias=True, mode="json")


@mcp.tool(name="fitcsv.import_workouts")
def fitcsv_import_workouts(payload: dict) -> dict:
    """
    Import workouts from CSV text (one row per set). Pass the current exercise catalog as `exercises`;
    names not found there are returned in `newExercises` for the caller to merge.
    Returns { status, workouts, newExercises, issues }; one workout per calendar day.
    """
    inp = ImportWorkoutsInput.model_validate(payload)
    result = import_workouts_impl(inp)
    return result.model_dump(by_alias=True, mode="json")


@mcp.tool(name="fitcsv.exercise_template")
def fitcsv_exercise_template() -> str:
    """Example exercise CSV showing the expected columns."""
    return generate_exercise_csv_template()


@mcp.tool(name="fitcsv.workout_template")
def fitcsv_workout_template() -> str:
    """Example workout CSV showing the expected columns."""
    return generate_workout_csv_template()


@mcp.resource("template://exercises", mime_type="text/csv")
def resource_exercise_template() -> str:
    """Read-only: example exercise CSV."""
    return generate_exercise_csv_template()


@mcp.resource("template://workouts", mime_type="text/csv")
def resource_workout_template() -> str:
    """Read-only: example workout CSV."""
    return generate_workout_csv_template()


def run() -> None:
    """Run the MCP server with stdio transport (default). Logs go to stderr."""
    logging.basicConfig(
        level=os.environ.get("FITCSV_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s MCP server", mcp.name)
    mcp.run()
