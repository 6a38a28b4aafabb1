import argparse
import logging
import sys
from pathlib import Path

from mealplan.infra.Plan_Store import PlanStore
from mealplan.infra.Recipe_Repository import JsonRecipeRepository
from mealplan.infra.Widget_Storage import JsonWidgetStorage
from mealplan.infra.pdf_utils import generate_week_pdf
from mealplan.utilities.config import RECIPES_FILE, STORAGE_FILE, configure_logging
from mealplan.utilities.dates import week_start

logger = logging.getLogger("mealplan")


def build_store(member_id: str, storage_file: Path = STORAGE_FILE, recipes_file: Path = RECIPES_FILE) -> PlanStore:
    return PlanStore(JsonWidgetStorage(storage_file), member_id, JsonRecipeRepository(recipes_file))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Household meal plan tools")
    parser.add_argument("--member", required=True, help="member id owning the plan")
    parser.add_argument("--week-offset", type=int, default=0, help="0 = current week, -1 = last week")
    sub = parser.add_subparsers(dest="command", required=True)
    imp = sub.add_parser("import", help="import a pasted weekly plan from a text file")
    imp.add_argument("file", type=Path)
    imp.add_argument("--both", action="store_true", help="apply every entry to adult and kids")
    sub.add_parser("prep", help="print this week's prep list")
    pdf = sub.add_parser("pdf", help="write the week as a printable PDF")
    pdf.add_argument("output", type=Path)
    args = parser.parse_args(argv)

    configure_logging()
    store = build_store(args.member)
    start = week_start(week_offset=args.week_offset)
    logger.debug(f"Running {args.command} for {args.member}, week of {start}")

    if args.command == "import":
        count = store.import_text(args.file.read_text(encoding="utf-8"), start, args.both)
        if not count:
            print("No meals found in the pasted text.")
            return 1
        print(f"Imported {count} day(s) into the week of {start}.")
    elif args.command == "prep":
        completions = store.get_prep_completions()
        for prep_date, bucket in store.week_prep_schedule(start).items():
            for item in bucket["items"]:
                mark = "x" if completions.get(item.completion_key(prep_date)) else " "
                print(f"[{mark}] {bucket['day_name']} for {bucket['for_day']} {item.for_meal_type}: "
                      f"{item.recipe_name} - {item.prep_instructions}")
    elif args.command == "pdf":
        days = store.week_days(start)
        args.output.write_bytes(generate_week_pdf(days, store.week_prep_schedule(start), store.kids_menu_enabled))
        print(f"PDF written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
