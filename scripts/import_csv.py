#!/usr/bin/env python3
"""
Run CSV files through the fitcsv importers and print a summary. Uses the fitcsv package directly
(no MCP server needed). Usage: python scripts/import_csv.py exercises|workouts FILE [CATALOG.json]
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

# Project root = parent of scripts/
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fitcsv.ingest import import_exercises_impl, import_workouts_impl
from fitcsv.models import Exercise, ImportExercisesInput, ImportWorkoutsInput


def _print_issues(issues) -> None:
    if issues:
        print("Issues:")
        for i in issues:
            print(f"  - [{i.severity}] {i.location} {i.type}: {i.message}")


def main() -> None:
    if len(sys.argv) < 3 or sys.argv[1] not in ("exercises", "workouts"):
        print(__doc__.strip())
        sys.exit(1)
    logging.basicConfig(level=logging.INFO)
    kind, path = sys.argv[1], Path(sys.argv[2])
    content = path.read_text(encoding="utf-8-sig", errors="replace")

    print(f"\n{'='*60}")
    print(f"FILE: {path.name}  ({kind})")
    print("=" * 60)

    if kind == "exercises":
        out = import_exercises_impl(ImportExercisesInput(content=content))
        print(f"Status: {out.status}")
        for row in out.exercises:
            print(f"  {row.name} [{row.category.value}] {row.description or ''}")
        _print_issues(out.issues)
        return

    catalog: list[Exercise] = []
    if len(sys.argv) > 3:
        raw = json.loads(Path(sys.argv[3]).read_text(encoding="utf-8"))
        catalog = [Exercise.model_validate(e) for e in raw]
    out = import_workouts_impl(ImportWorkoutsInput(content=content, exercises=catalog))
    print(f"Status: {out.status}")
    names = {e.id: e.name for e in catalog + out.new_exercises}
    for w in out.workouts:
        print(f"  {w.date.isoformat()}  sets={len(w.sets)}  notes={w.notes or '(none)'}")
        for s in w.sets:
            print(f"    {names.get(s.exercise_id, s.exercise_id)}: {s.reps} reps {s.notes or ''}")
    if out.new_exercises:
        print("New exercises: " + ", ".join(f"{e.name} [{e.category.value}]" for e in out.new_exercises))
    _print_issues(out.issues)


if __name__ == "__main__":
    main()
