from __future__ import annotations
import json
import logging
import time
from typing import Dict, List, Tuple

from .models import Column, Shelf, Wall

console_logger = logging.getLogger(__name__)


class ProjectFormatError(ValueError):
    pass


class ProjectState:
    """Проект комнаты в JSON: {projectId, walls, shelves, columns, ts}."""

    def __init__(self, project_id: str = ""):
        self.project_id = project_id or f"proj-{int(time.time() * 1000)}"

    def serialize(self, walls: List[Wall], shelves: List[Shelf], columns: List[Column]) -> Dict:
        return {
            "projectId": self.project_id,
            "walls": [w.to_dict() for w in walls],
            "shelves": [s.to_dict() for s in shelves],
            "columns": [c.to_dict() for c in columns],
            "ts": int(time.time() * 1000),
        }

    def deserialize(self, data: Dict) -> Tuple[List[Wall], List[Shelf], List[Column]]:
        if not isinstance(data, dict):
            raise ProjectFormatError("Файл проекта должен содержать JSON-объект")
        try:
            walls = [Wall.from_dict(w) for w in data.get("walls", [])]
            shelves = [Shelf.from_dict(s) for s in data.get("shelves", [])]
            columns = [Column.from_dict(c) for c in data.get("columns", [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ProjectFormatError(f"Повреждённая запись проекта: {e}") from e
        if data.get("projectId"):
            self.project_id = str(data["projectId"])
        console_logger.info(
            f"Loaded project {self.project_id}: {len(walls)} walls, "
            f"{len(shelves)} shelves, {len(columns)} columns"
        )
        return walls, shelves, columns

    def save(self, path: str, walls, shelves, columns):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.serialize(walls, shelves, columns), f, ensure_ascii=False, indent=2)

    def load(self, path: str):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProjectFormatError(f"Некорректный JSON: {e}") from e
        return self.deserialize(data)
