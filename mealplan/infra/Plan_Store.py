import logging
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from mealplan.domain.DayPlan import DayPlan
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.PrepItem import PrepItem
from mealplan.domain.WeeklyPlan import WeeklyPlan
from mealplan.events.Event_Bus import EventBus
from mealplan.events.event_helpers import publish_plan_updated, publish_prep_invalidated
from mealplan.logic.importing.apply import apply_parsed_plan
from mealplan.logic.importing.text_parser import parse_meal_plan_text
from mealplan.logic.planning.normalize import normalize_weekly_plan
from mealplan.logic.planning import transforms
from mealplan.logic.prep.schedule import derive_prep_schedule, meals_needing_prep
from mealplan.logic.reporting.nutrition import calculate_day_protein
from mealplan.logic.shopping.list_builder import Selection, all_slots, collect_shopping_items
from mealplan.utilities.config import KIDS_MENU_ENABLED
from mealplan.utilities.constants import BEFORE_WEEK, MEAL_PLAN_WIDGET_ID, VARIANTS
from mealplan.utilities.dates import (
    DateLike, add_days, day_name, format_iso, parse_iso, previous_day, week_dates, week_start,
)
from mealplan.utilities.validators import SlotInput, SlotKeyInput

logger = logging.getLogger(__name__)


def _valid_slot_key(date: str, variant: str, meal_type: str) -> bool:
    try:
        SlotKeyInput(date=date, variant=variant, meal_type=meal_type)
    except ValidationError as e:
        logger.warning(f"Rejected slot {date!r}/{variant!r}/{meal_type!r}: {e.error_count()} error(s)")
        return False
    return True


class PlanStore:
    """Owner of one member's meal-plan document.

    The document lives under the 'meal-plan' widget of the storage collaborator as
    ``{"weeklyPlan": {date: DayPlan}, "prepCompleted": {"<prepDate>:<name>": True}}``.
    Every public mutation reads the whole document, builds the new value and writes
    the whole document back. Keys the store does not know about are preserved.

    Consistency rule: prep for day d happens on d-1, so any change to day d drops
    the prep check-offs recorded for d-1.
    """

    def __init__(self, storage, member_id: str, recipe_repository=None,
                 event_bus: Optional[EventBus] = None, kids_menu_enabled: bool = KIDS_MENU_ENABLED):
        self.storage = storage
        self.member_id = member_id
        self.recipe_repository = recipe_repository
        self.event_bus = event_bus
        self.kids_menu_enabled = kids_menu_enabled

    # -------------------- Document --------------------
    def _read_document(self) -> Dict[str, Any]:
        doc = self.storage.get_widget_data(self.member_id, MEAL_PLAN_WIDGET_ID)
        if not isinstance(doc, dict):
            if doc is not None:
                logger.warning(f"Meal plan for {self.member_id} is {type(doc).__name__}; starting empty")
            doc = {}
        if not isinstance(doc.get("prepCompleted"), dict):
            doc["prepCompleted"] = {}
        return doc

    def _write_document(self, doc: Dict[str, Any], plan: Optional[WeeklyPlan] = None) -> None:
        if plan is not None:
            doc["weeklyPlan"] = plan.to_dict()
        self.storage.set_widget_data(self.member_id, MEAL_PLAN_WIDGET_ID, doc)

    def _write_days(self, doc: Dict[str, Any], plan: WeeklyPlan, dates: Iterable[str], action: str) -> None:
        self._write_document(doc, plan)
        publish_plan_updated(self.member_id, dates, action, bus=self.event_bus)

    def load(self) -> WeeklyPlan:
        return normalize_weekly_plan(self._read_document().get("weeklyPlan"))

    def save(self, plan: WeeklyPlan) -> None:
        """Replace the whole plan; prep check-offs are dropped for every day that changed."""
        doc = self._read_document()
        previous = normalize_weekly_plan(doc.get("weeklyPlan"))
        plan = normalize_weekly_plan(plan)
        changed = sorted(d for d in set(previous.days) | set(plan.days) if previous.get(d) != plan.get(d))
        self._write_days(doc, plan, plan.days.keys(), "save")
        for changed_date in changed:
            self._invalidate_for_changed_day(changed_date)

    def get_day(self, date: str) -> DayPlan:
        return self.load().get(date)

    # -------------------- Slot mutations --------------------
    def _replace_day(self, date: str, day: DayPlan, action: str) -> None:
        doc = self._read_document()
        plan = normalize_weekly_plan(doc.get("weeklyPlan"))
        plan.set(date, day)
        self._write_days(doc, plan, [date], action)

    def _invalidate_for_changed_day(self, date: str) -> None:
        prep_date = previous_day(date)
        if prep_date is not None:
            self.invalidate_prep_completions(prep_date)
        if parse_iso(date) == week_start(date):
            # The first day of a week buckets its prep under the shared sentinel
            self.invalidate_prep_completions(BEFORE_WEEK)

    def set_slot(self, date: str, variant: str, meal_type: str, slot: Any) -> bool:
        """Replace one slot (any stored shape) or clear it with None.

        Returns False without writing when the date, variant or meal type is invalid.
        Always drops prep check-offs for the day before ``date`` afterwards.
        """
        if not _valid_slot_key(date, variant, meal_type):
            return False
        day = transforms.with_slot(self.get_day(date), variant, meal_type, slot)
        self._replace_day(date, day, "set_slot")
        self._invalidate_for_changed_day(date)
        return True

    def save_slot(self, date: str, variant: str, meal_type: str, items: List[str],
                  protein: Optional[float] = None, prep_notes: Optional[str] = None) -> bool:
        """Editor entry point: validates items/protein/notes, clearing the slot when all are empty."""
        try:
            data = SlotInput(items=items or [], protein=protein, prep_notes=prep_notes)
        except ValidationError as e:
            logger.warning(f"Rejected slot content for {date}/{variant}/{meal_type}: {e.error_count()} error(s)")
            return False
        if not data.items and data.prep_notes is None:
            return self.set_slot(date, variant, meal_type, None)
        slot = MealSlot(items=data.items, protein=data.protein, prep_notes=data.prep_notes)
        return self.set_slot(date, variant, meal_type, slot)

    def add_item(self, date: str, variant: str, meal_type: str, item: str) -> bool:
        """Append one item; False when invalid, blank or already in the slot."""
        if not _valid_slot_key(date, variant, meal_type):
            return False
        day = transforms.with_item_added(self.get_day(date), variant, meal_type, item)
        if day is None:
            return False
        self._replace_day(date, day, "add_item")
        self._invalidate_for_changed_day(date)
        return True

    def remove_item(self, date: str, variant: str, meal_type: str, index: int) -> bool:
        if not _valid_slot_key(date, variant, meal_type):
            return False
        day = transforms.with_item_removed(self.get_day(date), variant, meal_type, index)
        if day is None:
            return False
        self._replace_day(date, day, "remove_item")
        self._invalidate_for_changed_day(date)
        return True

    def toggle_completion(self, date: str, meal_type: str, variant: str) -> bool:
        """Flip a slot's completed flag and return the new state.

        An empty slot cannot be completed: returns False and writes nothing.
        """
        if not _valid_slot_key(date, variant, meal_type):
            return False
        day = transforms.with_completion_toggled(self.get_day(date), variant, meal_type)
        if day is None:
            return False
        self._replace_day(date, day, "toggle_completion")
        return day.slot(variant, meal_type).completed

    def copy_adult_to_kids(self, date: str, meal_type: str) -> bool:
        if not _valid_slot_key(date, "kids", meal_type):
            return False
        day = transforms.with_adult_copied_to_kids(self.get_day(date), meal_type)
        if day is None:
            return False
        self._replace_day(date, day, "copy_adult_to_kids")
        self._invalidate_for_changed_day(date)
        return True

    def copy_day(self, source_date: str, target_date: str) -> bool:
        """Copy a day's plan onto another date with every completed flag cleared.

        Returns False when either date is invalid or the source has no stored plan.
        """
        if parse_iso(source_date) is None or parse_iso(target_date) is None:
            return False
        doc = self._read_document()
        plan = normalize_weekly_plan(doc.get("weeklyPlan"))
        if source_date not in plan:
            return False
        plan.set(target_date, transforms.clone_day_plan(plan.get(source_date), strip_completed=True))
        self._write_days(doc, plan, [target_date], "copy_day")
        self._invalidate_for_changed_day(target_date)
        return True

    def copy_week(self, source_week_start: DateLike, target_week_start: DateLike) -> int:
        """Copy every stored day of one week onto the matching weekday of another.

        Returns:
            int: number of days copied
        """
        copied = 0
        for source, target in zip(week_dates(source_week_start), week_dates(target_week_start)):
            if self.copy_day(source, target):
                copied += 1
        logger.info(f"Copied {copied} day(s) from week {source_week_start} to {target_week_start}")
        return copied

    # -------------------- Prep completions --------------------
    def get_prep_completions(self) -> Dict[str, bool]:
        return dict(self._read_document()["prepCompleted"])

    def toggle_prep_completion(self, prep_date: str, recipe_name: str) -> bool:
        doc = self._read_document()
        completions = doc["prepCompleted"]
        key = f"{prep_date}:{recipe_name}"
        if completions.get(key):
            del completions[key]
        else:
            completions[key] = True
        self._write_document(doc)
        return bool(completions.get(key))

    def invalidate_prep_completions(self, date: str, recipe_name: Optional[str] = None) -> int:
        """Remove prep check-offs whose prep date is ``date`` (optionally one recipe only).

        Returns:
            int: number of entries removed
        """
        doc = self._read_document()
        completions = doc["prepCompleted"]
        stale = []
        for key in completions:
            key_date, _, key_recipe = key.partition(":")
            if key_date == date and (recipe_name is None or key_recipe == recipe_name):
                stale.append(key)
        if not stale:
            return 0
        for key in stale:
            del completions[key]
        self._write_document(doc)
        logger.debug(f"Dropped {len(stale)} prep completion(s) for {date}")
        publish_prep_invalidated(self.member_id, date, len(stale), bus=self.event_bus)
        return len(stale)

    def clear_prep_completions(self, week_start_date: Optional[DateLike] = None) -> int:
        """Clear prep check-offs for the week starting at ``week_start_date``, or all of them.

        Rules:
          - Week mode removes keys dated within [start, start + 7 days) and the before-week sentinel.
          - Keys whose date part cannot be parsed are left alone in week mode.
        """
        doc = self._read_document()
        completions = doc["prepCompleted"]
        if week_start_date is None:
            removed = len(completions)
            doc["prepCompleted"] = {}
        else:
            start = parse_iso(week_start_date)
            if start is None:
                return 0
            end = start + timedelta(days=7)
            stale = []
            for key in completions:
                key_date = key.partition(":")[0]
                if key_date == BEFORE_WEEK:
                    stale.append(key)
                    continue
                d = parse_iso(key_date)
                if d is not None and start <= d < end:
                    stale.append(key)
            for key in stale:
                del completions[key]
            removed = len(stale)
        self._write_document(doc)
        return removed

    # -------------------- Import --------------------
    def import_parsed(self, parsed: List[dict], week_start_date: DateLike,
                      apply_both_variants: bool = False) -> int:
        """Replace the target week with parsed days; returns how many days were imported."""
        if parse_iso(week_start_date) is None:
            return 0
        self.clear_prep_completions(week_start_date)
        doc = self._read_document()
        plan, imported = apply_parsed_plan(doc.get("weeklyPlan"), parsed, week_start_date,
                                           apply_both_variants=apply_both_variants)
        self._write_days(doc, plan, week_dates(week_start_date), "import")
        self.invalidate_prep_completions(previous_day(week_start_date))
        logger.info(f"Imported {imported} day(s) into week of {week_start_date} for {self.member_id}")
        return imported

    def import_text(self, text: str, week_start_date: DateLike, apply_both_variants: bool = False) -> int:
        """Parse pasted text and import it; 0 (and no write) when nothing was recognized."""
        parsed = parse_meal_plan_text(text)
        if not parsed:
            logger.info("Nothing to import from pasted meal plan text")
            return 0
        return self.import_parsed(parsed, week_start_date, apply_both_variants)

    # -------------------- Read surfaces --------------------
    def recipes(self) -> list:
        if self.recipe_repository is None:
            return []
        return self.recipe_repository.get_recipes_for_meal_plan(self.member_id)

    def week_days(self, week_start_date: Optional[DateLike] = None, week_offset: int = 0) -> List[Dict[str, Any]]:
        """Seven day entries for a week view: date, names, plan and adult protein."""
        start = week_start(week_start_date, week_offset)
        plan = self.load()
        recipes = self.recipes()
        today = date.today()
        days = []
        for i in range(7):
            d = start + timedelta(days=i)
            date_str = format_iso(d)
            day_plan = plan.get(date_str)
            days.append({
                'date': date_str,
                'day_name': day_name(d),
                'short_name': day_name(d, short=True),
                'date_num': d.day,
                'is_today': d == today,
                'plan': day_plan,
                'show_kids': self.kids_menu_enabled,
                'adult_protein': calculate_day_protein(day_plan.adult, recipes),
            })
        return days

    def week_prep_schedule(self, week_start_date: Optional[DateLike] = None, week_offset: int = 0) -> Dict[str, Dict[str, Any]]:
        return derive_prep_schedule(self.week_days(week_start_date, week_offset), self.recipes())

    def todays_plan(self, today: Optional[DateLike] = None) -> DayPlan:
        d = parse_iso(today) if today is not None else None
        return self.get_day(format_iso(d or date.today()))

    def tomorrow_prep_alerts(self, today: Optional[DateLike] = None) -> List[PrepItem]:
        """Recipes that need prep today for tomorrow's meals."""
        base = parse_iso(today) if today is not None else date.today()
        tomorrow = add_days(base or date.today(), 1)
        return meals_needing_prep(self.get_day(tomorrow), self.recipes())

    def shopping_items(self, selections: Optional[Iterable[Selection]] = None,
                       week_start_date: Optional[DateLike] = None, skip_completed: bool = False) -> List[str]:
        """Items to hand to the grocery list; defaults to every slot of the given (or current) week."""
        if selections is None:
            selections = all_slots(week_dates(week_start(week_start_date)), VARIANTS)
        return collect_shopping_items(self.load(), selections, skip_completed=skip_completed)
