"""
2D point with in-place transforms.

A Point is also the storage unit of a Path: it may carry an incoming control
point (`prev`), an outgoing control point (`next`) and a subpath-start marker
(`is_move_to`). One control on a segment makes it quadratic, two make it cubic,
none make it straight.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """A point in 2D space, optionally carrying bezier controls."""
    x: float = 0.0
    y: float = 0.0
    prev: Optional["Point"] = None
    next: Optional["Point"] = None
    is_move_to: bool = False

    model_config = ConfigDict(extra="forbid")

    def __init__(self, x=0.0, y=0.0, **data):
        super().__init__(x=x, y=y, **data)

    def move(self, dx, dy):
        """Move by x/y deltas."""
        self.x += dx
        self.y += dy
        return self

    def move_dir(self, dist, angle):
        """Move by distance in direction angle (radians)."""
        self.x += dist * math.cos(angle)
        self.y += dist * math.sin(angle)
        return self

    def rotate(self, angle, pivot):
        """Rotate around pivot by angle (radians)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dx = self.x - pivot.x
        dy = self.y - pivot.y
        self.x = pivot.x + dx * cos_a - dy * sin_a
        self.y = pivot.y + dx * sin_a + dy * cos_a
        return self

    def scale(self, sc_x, sc_y, pivot):
        """Scale away from pivot by per-axis factors."""
        self.x = pivot.x + (self.x - pivot.x) * sc_x
        self.y = pivot.y + (self.y - pivot.y) * sc_y
        return self

    def matrix_transform(self, m):
        """Apply an affine Matrix."""
        self.x, self.y = m.apply(self.x, self.y)
        return self

    def clone(self):
        """
        Deep copy, including owned control points.

        The clone shares no objects with this point.
        """
        return Point(
            self.x,
            self.y,
            prev=self.prev.clone() if self.prev is not None else None,
            next=self.next.clone() if self.next is not None else None,
            is_move_to=self.is_move_to,
        )

    def angle_to(self, other):
        """Angle of the vector from other to this point, atan2 convention."""
        return math.atan2(self.y - other.y, self.x - other.x)

    def delta_to(self, other):
        """Component-wise (dx, dy) from this point to other."""
        return other.x - self.x, other.y - self.y

    def distance_to(self, other):
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_right_to(self, other):
        return self.x > other.x

    def is_down_to(self, other):
        return self.y > other.y

    def has_controls(self):
        return self.prev is not None or self.next is not None

    def __str__(self):
        return f"({self.x:g}, {self.y:g})"


Point.model_rebuild()
