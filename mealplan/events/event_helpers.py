"""Event helper utilities.

Helpers for publishing meal-plan events on an event bus (the global one by
default).

Quick import:
    from mealplan.events.event_helpers import publish_plan_updated, publish_prep_invalidated
"""
from __future__ import annotations
from typing import Iterable, Optional
from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, MEAL_PLAN_UPDATED, PREP_INVALIDATED

__all__ = ['publish_plan_updated', 'publish_prep_invalidated', 'MEAL_PLAN_UPDATED', 'PREP_INVALIDATED']


def publish_plan_updated(member_id: str, dates: Iterable[str], action: str,
                         bus: Optional[EventBus] = None) -> int:
    """Publish a meal_plan.updated event so views can re-render."""
    return (bus or GLOBAL_EVENT_BUS).publish(MEAL_PLAN_UPDATED, {
        'member_id': member_id,
        'dates': sorted(dates),
        'action': action,
    })


def publish_prep_invalidated(member_id: str, prep_date: str, removed: int,
                             bus: Optional[EventBus] = None) -> int:
    """Publish a prep.invalidated event after stale prep check-offs were dropped."""
    return (bus or GLOBAL_EVENT_BUS).publish(PREP_INVALIDATED, {
        'member_id': member_id,
        'prep_date': prep_date,
        'removed': removed,
    })
