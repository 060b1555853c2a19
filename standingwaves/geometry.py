# standingwaves/geometry.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np

from .trig import TrigCache, DEFAULT_TRIG


@dataclass(frozen=True)
class Room:
    width: float
    depth: float
    height: float


@dataclass(frozen=True)
class Position:
    """Listener/speaker position, measured from the left wall, front wall and floor."""
    left: float
    front: float
    floor: float


@dataclass(frozen=True)
class Geometry:
    room: Room
    position: Position

    def key(self) -> tuple:
        r, p = self.room, self.position
        return (float(r.width), float(r.depth), float(r.height),
                float(p.left), float(p.front), float(p.floor))

    @classmethod
    def from_key(cls, key: tuple) -> "Geometry":
        w, d, h, left, front, floor = key
        return cls(Room(w, d, h), Position(left, front, floor))


@dataclass(frozen=True)
class PlaneDistances:
    """
    Distance from the position to each bounding plane along a direction
    (and its opposite). inf means the direction is parallel to that plane.
    """
    left: float
    right: float
    front: float
    back: float
    below: float
    above: float

    def as_array(self) -> np.ndarray:
        return np.array([self.left, self.right, self.front,
                         self.back, self.below, self.above], dtype=float)


def plane_distances(geometry: Geometry, alpha: float, beta: float,
                    trig: Optional[TrigCache] = None) -> PlaneDistances:
    """
    Absolute distances to the six planes in the direction of polar angles
    (alpha, beta). Division by zero gives inf on purpose; beta alone
    decides below/above.
    """
    trig = trig or DEFAULT_TRIG
    room, pos = geometry.room, geometry.position
    # numpy scalars so x/0 is inf (or nan for 0/0) instead of ZeroDivisionError
    left, front, floor = (np.float64(v) for v in (pos.left, pos.front, pos.floor))
    width, depth, height = (np.float64(v) for v in (room.width, room.depth, room.height))

    cos_a = np.float64(trig.abs_cos(alpha))
    sin_a = np.float64(trig.abs_sin(alpha))
    cos_b = np.float64(trig.abs_cos(beta))
    sin_b = np.float64(trig.abs_sin(beta))

    with np.errstate(divide="ignore", invalid="ignore"):
        return PlaneDistances(
            left=float(left / cos_a / cos_b),
            right=float((width - left) / cos_a / cos_b),
            front=float(front / sin_a / cos_b),
            back=float((depth - front) / sin_a / cos_b),
            below=float(floor / sin_b),
            above=float((height - floor) / sin_b),
        )


def is_off_center(geometry: Geometry, tolerance: float = 0.1) -> bool:
    """True when the listener is more than ``tolerance`` of the width away from the centre line."""
    room, pos = geometry.room, geometry.position
    return abs(pos.left - room.width / 2) > room.width * tolerance
