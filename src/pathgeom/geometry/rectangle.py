"""
Axis-aligned rectangle described by two corners.

Corners are not kept ordered: `from_` may hold the larger coordinate on either
axis, which is how callers express a mirrored placement target. Call
`normalize()` before relying on `from_` being the top-left corner.
"""

from pydantic import BaseModel, ConfigDict, Field

from pathgeom.geometry.point import Point


class Rectangle(BaseModel):
    """Rectangle spanned by `from_` and `to`."""
    from_: Point = Field(default_factory=Point, alias="from")
    to: Point = Field(default_factory=Point)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def __init__(self, from_=None, to=None, **data):
        if from_ is not None:
            data["from_"] = from_
        if to is not None:
            data["to"] = to
        super().__init__(**data)

    @classmethod
    def from_bounds(cls, min_x, min_y, max_x, max_y):
        return cls(Point(min_x, min_y), Point(max_x, max_y))

    def normalize(self):
        """Reorder corners per axis so `from_` is the minimum corner."""
        if self.from_.x > self.to.x:
            self.from_.x, self.to.x = self.to.x, self.from_.x
        if self.from_.y > self.to.y:
            self.from_.y, self.to.y = self.to.y, self.from_.y
        return self

    def is_right_to(self, other):
        """True if this rectangle's `from_` corner lies right of other's."""
        return self.from_.is_right_to(other.from_)

    def is_down_to(self, other):
        """True if this rectangle's `from_` corner lies below other's."""
        return self.from_.is_down_to(other.from_)

    def is_flipped_x(self):
        return self.from_.is_right_to(self.to)

    def is_flipped_y(self):
        return self.from_.is_down_to(self.to)

    def get_width(self):
        return abs(self.to.x - self.from_.x)

    def get_height(self):
        return abs(self.to.y - self.from_.y)

    def get_center(self):
        return Point((self.from_.x + self.to.x) / 2, (self.from_.y + self.to.y) / 2)

    def place_around_point(self, pt, dist):
        """Make this a square of half-size dist centered on pt."""
        self.from_ = Point(pt.x - dist, pt.y - dist)
        self.to = Point(pt.x + dist, pt.y + dist)
        return self

    def contains(self, pt, tolerance=0.0):
        """Inclusive containment test; assumes a normalized rectangle."""
        return (
            self.from_.x - tolerance <= pt.x <= self.to.x + tolerance
            and self.from_.y - tolerance <= pt.y <= self.to.y + tolerance
        )

    def clone(self):
        return Rectangle(self.from_.clone(), self.to.clone())

    def as_tuple(self):
        """(min_x, min_y, max_x, max_y) of the corners as stored."""
        return (self.from_.x, self.from_.y, self.to.x, self.to.y)
