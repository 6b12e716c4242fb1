from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

FLOOR_ID = "floor"


class Category:
    WALL = "wall"
    SHELF = "shelf"
    COLUMN = "column"

    ALL = (WALL, SHELF, COLUMN)


class Texture:
    WOOD = "wood"
    BRICK = "brick"
    CONCRETE = "concrete"
    TILE = "tile"
    MARBLE = "marble"
    DEFAULT = "default"


@dataclass(frozen=True)
class Placement:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def moved(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Placement":
        return Placement(self.x + dx, self.y + dy, self.z + dz)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Placement":
        data = data or {}
        return cls(float(data.get("x", 0)), float(data.get("y", 0)), float(data.get("z", 0)))


@dataclass
class Wall:
    id: str
    name: str = ""
    width: float = 400.0   # см
    height: float = 250.0
    depth: float = 10.0
    position: Placement = field(default_factory=Placement)
    rotation: Placement = field(default_factory=Placement)
    is_locked: bool = False
    texture: str = Texture.DEFAULT

    category = Category.WALL

    @property
    def is_floor(self) -> bool:
        return self.id == FLOOR_ID

    def copy(self, **changes) -> "Wall":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id, "name": self.name,
            "width": self.width, "height": self.height, "depth": self.depth,
            "position": self.position.to_dict(), "rotation": self.rotation.to_dict(),
            "isLocked": self.is_locked, "texture": self.texture,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Wall":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            width=float(data.get("width", 0)),
            height=float(data.get("height", 0)),
            depth=float(data.get("depth", 0)),
            position=Placement.from_dict(data.get("position")),
            rotation=Placement.from_dict(data.get("rotation")),
            is_locked=bool(data.get("isLocked", False)),
            texture=data.get("texture") or Texture.DEFAULT,
        )


@dataclass
class Shelf:
    id: str
    width: float = 80.0
    height: float = 10.0
    depth: float = 30.0
    position: Placement = field(default_factory=Placement)
    rotation: Optional[Placement] = None   # None: без поворота
    wall_id: Optional[str] = None          # стена, на которой создана полка

    category = Category.SHELF

    # у полок нет имени и блокировки, но RoomScene обращается к ним одинаково
    name = ""
    is_locked = False

    def copy(self, **changes) -> "Shelf":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        out = {
            "id": self.id,
            "width": self.width, "height": self.height, "depth": self.depth,
            "position": self.position.to_dict(),
        }
        if self.rotation is not None:
            out["rotation"] = self.rotation.to_dict()
        if self.wall_id:
            out["wallId"] = self.wall_id
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "Shelf":
        rot = data.get("rotation")
        return cls(
            id=str(data["id"]),
            width=float(data.get("width", 0)),
            height=float(data.get("height", 0)),
            depth=float(data.get("depth", 0)),
            position=Placement.from_dict(data.get("position")),
            rotation=Placement.from_dict(rot) if rot is not None else None,
            wall_id=data.get("wallId"),
        )


@dataclass
class Column:
    id: str
    name: str = ""
    width: float = 15.0
    height: float = 250.0
    depth: float = 15.0
    position: Placement = field(default_factory=Placement)
    rotation: Placement = field(default_factory=Placement)
    is_locked: bool = False
    wall_id: Optional[str] = None

    category = Category.COLUMN

    def copy(self, **changes) -> "Column":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        out = {
            "id": self.id, "name": self.name,
            "width": self.width, "height": self.height, "depth": self.depth,
            "position": self.position.to_dict(), "rotation": self.rotation.to_dict(),
            "isLocked": self.is_locked,
        }
        if self.wall_id:
            out["wallId"] = self.wall_id
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "Column":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            width=float(data.get("width", 0)),
            height=float(data.get("height", 0)),
            depth=float(data.get("depth", 0)),
            position=Placement.from_dict(data.get("position")),
            rotation=Placement.from_dict(data.get("rotation")),
            is_locked=bool(data.get("isLocked", False)),
            wall_id=data.get("wallId"),
        )
