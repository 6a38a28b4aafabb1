"""Widget data persistence (the key-value collaborator behind the plan store).

Contract: get_widget_data(member_id, widget_id) -> value | None and
set_widget_data(member_id, widget_id, value). Values are plain JSON documents.
"""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from mealplan.utilities.config import STORAGE_FILE

logger = logging.getLogger(__name__)


class InMemoryWidgetStorage:
    """Keeps ``{member_id: {widget_id: value}}`` in memory; values are copied in and out."""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(initial) if initial else {}

    def get_widget_data(self, member_id: str, widget_id: str) -> Any:
        return copy.deepcopy(self._data.get(member_id, {}).get(widget_id))

    def set_widget_data(self, member_id: str, widget_id: str, value: Any) -> None:
        self._data.setdefault(member_id, {})[widget_id] = copy.deepcopy(value)


class JsonWidgetStorage:
    """Stores ``{member_id: {widget_id: value}}`` in a single JSON file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or STORAGE_FILE)

    def _read_all(self) -> Dict[str, Any]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in widget storage {self.path}: {e}")
            return {}
        except OSError as e:
            logger.error(f"Error reading widget storage {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring widget storage {self.path}: top level is {type(data).__name__}")
            return {}
        return data

    def get_widget_data(self, member_id: str, widget_id: str) -> Any:
        member = self._read_all().get(member_id)
        if not isinstance(member, dict):
            return None
        return member.get(widget_id)

    def set_widget_data(self, member_id: str, widget_id: str, value: Any) -> None:
        data = self._read_all()
        member = data.get(member_id)
        if not isinstance(member, dict):
            member = data[member_id] = {}
        member[widget_id] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved widget {widget_id} for member {member_id} to {self.path}")
