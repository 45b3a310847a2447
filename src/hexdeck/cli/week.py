"""Handler for 'hexdeck week new'."""

import datetime

from hexdeck.cli._common import error, output_result, planner_path
from hexdeck.config import read_config
from hexdeck.model.document import PlannerFile
from hexdeck.template import new_week_text


def week_new(args) -> int:
    """Write an empty planner for an ISO week."""
    today = datetime.date.today().isocalendar()
    week = args.week or today[1]
    year = args.year or today[0]

    planner = PlannerFile(planner_path(args))
    if planner.path.exists() and not args.force:
        error(f"{planner.path} already exists (use --force to overwrite)", args.json)

    try:
        text = new_week_text(week, year, weekdays=read_config()["weekdays"])
    except ValueError as e:
        error(str(e), args.json)

    planner.write(text)

    output_result(
        {"file": str(planner.path), "week": week, "year": year},
        f"Created week {week} of {year} at {planner.path}",
        args.json,
    )
    return 0
