"""Core meal-plan logic layer.

Subpackages:
- planning: normalizing stored slots/days into the canonical model, plan transforms
- prep: deriving the "prep the day before" schedule
- reporting: protein aggregation
- importing: parsing pasted weekly plans and applying them to a week
- shopping: flattening planned items for the grocery list

Everything here is pure: functions take values and return new values.
"""
__all__ = ["planning", "prep", "reporting", "importing", "shopping"]
