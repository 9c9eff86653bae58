"""
PathGroup: several transformable objects moved as one.

The group implements the Transformable operations itself, by delegating to
its members, and gains mirror/align/placement from Placeable like Path does.
"""

from pathgeom.geometry.placement import Placeable
from pathgeom.geometry.point import Point
from pathgeom.geometry.rectangle import Rectangle


class PathGroup(Placeable):
    """Ordered collection of Paths (or nested groups)."""

    def __init__(self, items=None):
        self.items = list(items) if items is not None else []

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def add(self, item):
        self.items.append(item)
        return self

    def get_bound_rect(self):
        """Union of member bound rects; None when no member has bounds."""
        rects = [r for r in (item.get_bound_rect() for item in self.items) if r is not None]
        if not rects:
            return None

        return Rectangle.from_bounds(
            min(min(r.from_.x, r.to.x) for r in rects),
            min(min(r.from_.y, r.to.y) for r in rects),
            max(max(r.from_.x, r.to.x) for r in rects),
            max(max(r.from_.y, r.to.y) for r in rects),
        )

    def move(self, dx, dy):
        for item in self.items:
            item.move(dx, dy)
        return self

    def move_dir(self, dist, angle):
        for item in self.items:
            item.move_dir(dist, angle)
        return self

    def rotate(self, angle, pivot):
        pivot = Point(pivot.x, pivot.y)
        for item in self.items:
            item.rotate(angle, pivot)
        return self

    def scale(self, sc_x, sc_y, pivot):
        pivot = Point(pivot.x, pivot.y)
        for item in self.items:
            item.scale(sc_x, sc_y, pivot)
        return self

    def matrix_transform(self, m):
        for item in self.items:
            item.matrix_transform(m)
        return self

    def clone(self):
        return PathGroup(item.clone() for item in self.items)
