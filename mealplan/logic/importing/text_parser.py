"""Parser for weekly meal plans pasted as free text.

Accepted input is deliberately loose, e.g.::

    Monday:
    Breakfast: Oatmeal, Toast
    Kids Lunch: Chicken Nuggets
    Dinner -
      Salmon; Rice
    ---
    Tuesday
    Kids:
    Dinner: Mac and cheese

The parser is a small state machine. ParserState holds the current day, the
current variant and the current meal type, and each line is offered to the
matchers in LINE_MATCHERS in order until one consumes it. Lines that nothing
understands are dropped. Nothing here raises: bad input gives a short or
empty list.
"""
import logging
import re
from typing import Callable, List, Optional

from mealplan.utilities.constants import BOTH_VARIANTS, DAY_NAMES, MEAL_TYPE_ALIASES, MEAL_TYPES

logger = logging.getLogger(__name__)

_BULLET = re.compile(r'^(?:[-*•]\s+)+')
_ITEM_SPLIT = re.compile(r'[,;]')
_VARIANT_HEADERS = (
    ('adult:', 'adult'), ('adults:', 'adult'), ('adult -', 'adult'),
    ('kids:', 'kids'), ('kid:', 'kids'), ('kids -', 'kids'),
)
# Longest alias first so "snacks" is not read as "snack" + "s"; the \b after it
# leaves words such as "Dinnertime" to the continuation rule
_ALIAS_PATTERN = '|'.join(sorted(MEAL_TYPE_ALIASES, key=len, reverse=True))
_MEAL_LINE = re.compile(
    rf'^(?:(?P<prefix>kids?|adults?)\s+)?(?P<meal>{_ALIAS_PATTERN})\b[:\s-]*(?P<content>.*)$',
    re.IGNORECASE,
)


class ParserState:
    def __init__(self):
        self.days: List[dict] = []
        self.current_day: Optional[dict] = None
        self.current_variant: str = BOTH_VARIANTS
        self.current_meal_type: Optional[str] = None

    def start_day(self, day_index: int) -> None:
        self.close_day()
        self.current_day = {
            'day_index': day_index,
            'day_name': DAY_NAMES[day_index].capitalize(),
            'meals': {meal_type: [] for meal_type in MEAL_TYPES},
        }
        self.current_variant = BOTH_VARIANTS
        self.current_meal_type = None

    def close_day(self) -> None:
        if self.current_day is not None:
            self.days.append(self.current_day)
        self.current_day = None

    def record(self, meal_type: str, variant: str, text: str) -> None:
        items = split_items(text)
        if items:
            self.current_day['meals'][meal_type].append({'variant': variant, 'items': items})


def split_items(text: str) -> List[str]:
    return [item.strip() for item in _ITEM_SPLIT.split(text) if item.strip()]


def _match_separator(line: str, lower: str, state: ParserState) -> bool:
    return lower.startswith('---')


def _match_day(line: str, lower: str, state: ParserState) -> bool:
    for index, name in enumerate(DAY_NAMES):
        if lower.startswith(name):
            state.start_day(index)
            return True
    return False


def _match_outside_day(line: str, lower: str, state: ParserState) -> bool:
    # Anything before the first day header is discarded
    return state.current_day is None


def _match_variant_header(line: str, lower: str, state: ParserState) -> bool:
    for prefix, variant in _VARIANT_HEADERS:
        if lower.startswith(prefix):
            state.current_variant = variant
            state.current_meal_type = None
            return True
    return False


def _match_meal_line(line: str, lower: str, state: ParserState) -> bool:
    match = _MEAL_LINE.match(line)
    if not match:
        return False
    meal_type = MEAL_TYPE_ALIASES[match.group('meal').lower()]
    state.current_meal_type = meal_type
    prefix = (match.group('prefix') or '').lower()
    if prefix.startswith('kid'):
        variant = 'kids'
    elif prefix.startswith('adult'):
        variant = 'adult'
    else:
        variant = state.current_variant
    state.record(meal_type, variant, match.group('content'))
    return True


def _match_continuation(line: str, lower: str, state: ParserState) -> bool:
    if state.current_meal_type is None:
        return False
    state.record(state.current_meal_type, state.current_variant, line)
    return True


LINE_MATCHERS: List[Callable[[str, str, ParserState], bool]] = [
    _match_separator,
    _match_day,
    _match_outside_day,
    _match_variant_header,
    _match_meal_line,
    _match_continuation,
]


def parse_meal_plan_text(text) -> List[dict]:
    """Parse pasted text into ParsedDay dicts.

    Each ParsedDay is ``{'day_index': 0..6 (Sunday=0), 'day_name': str,
    'meals': {meal_type: [{'variant': 'adult'|'kids'|'both', 'items': [str]}]}}``.
    """
    if not isinstance(text, str):
        return []
    state = ParserState()
    for raw_line in text.splitlines():
        line = _BULLET.sub('', raw_line.strip()).strip()
        if not line:
            continue
        lower = line.lower()
        for matcher in LINE_MATCHERS:
            if matcher(line, lower, state):
                break
    state.close_day()
    logger.debug(f"Parsed {len(state.days)} day(s) from {len(text)} characters of text")
    return state.days


def summarize_parsed_days(parsed: List[dict]) -> List[str]:
    """One preview line per parsed meal, e.g. 'Monday - Lunch: Soup, Nuggets (kids)'."""
    lines = []
    for day in parsed:
        for meal_type in MEAL_TYPES:
            entries = day.get('meals', {}).get(meal_type) or []
            labels = []
            for entry in entries:
                for item in entry['items']:
                    labels.append(item if entry['variant'] == BOTH_VARIANTS else f"{item} ({entry['variant']})")
            if labels:
                lines.append(f"{day['day_name']} - {meal_type.capitalize()}: {', '.join(labels)}")
    return lines


__all__ = ['ParserState', 'LINE_MATCHERS', 'parse_meal_plan_text', 'split_items', 'summarize_parsed_days']
