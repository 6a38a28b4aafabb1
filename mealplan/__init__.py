"""Household meal plan core: canonical plan model, prep schedule and text import."""

__version__ = "0.3.0"
