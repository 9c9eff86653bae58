"""
Shape placement shared by every transformable geometry object.

`Placeable` implements mirroring, alignment and shape-fitting purely in terms
of `get_bound_rect`, `move` and `scale`, so any class providing the
`Transformable` operations gets them without knowing the other's internals.
"""

from typing import Protocol, runtime_checkable

from pathgeom.geometry.rectangle import Rectangle
from pathgeom.tracer import get_tracer, trace


@runtime_checkable
class Transformable(Protocol):
    """Operations the placement helpers and outer layers rely on."""

    def get_bound_rect(self): ...

    def move(self, dx, dy): ...

    def rotate(self, angle, pivot): ...

    def scale(self, sc_x, sc_y, pivot): ...

    def matrix_transform(self, m): ...


MIRROR_ORIENTATIONS = ("horiz", "vert")
ALIGN_BASES = ("left", "right", "center", "top", "bottom", "vert")


class Placeable:
    """Mixin adding placement operations to a Transformable."""

    def get_center(self):
        """Center of the bound rect."""
        return self.get_bound_rect().get_center()

    def mirror(self, orientation):
        """
        Mirror about the own bound-rect center.

        Args:
            orientation: 'horiz' flips x, 'vert' flips y
        """
        if orientation not in MIRROR_ORIENTATIONS:
            raise ValueError(f"Unknown mirror orientation: {orientation!r}")

        c = self.get_center()
        if orientation == "horiz":
            self.scale(-1, 1, c)
        else:
            self.scale(1, -1, c)
        return self

    def align(self, base, rect):
        """
        Move so the bound rect touches an edge of rect or centers on it.

        Args:
            base: 'left', 'right', 'top', 'bottom', or 'center' (horizontal
                centering) / 'vert' (vertical centering)
            rect: the reference Rectangle, read only
        """
        if base not in ALIGN_BASES:
            raise ValueError(f"Unknown align base: {base!r}")

        area = rect.clone().normalize()
        r = self.get_bound_rect()
        c = r.get_center()
        rw = r.get_width() / 2
        rh = r.get_height() / 2
        dx = dy = 0.0

        if base == "left":
            dx = area.from_.x - (c.x - rw)
        elif base == "right":
            dx = area.to.x - (c.x + rw)
        elif base == "center":
            dx = area.from_.x + area.get_width() / 2 - c.x
        elif base == "top":
            dy = area.from_.y - (c.y - rh)
        elif base == "bottom":
            dy = area.to.y - (c.y + rh)
        else:
            dy = area.from_.y + area.get_height() / 2 - c.y

        self.move(dx, dy)
        return self

    @trace(label="place_into_rect")
    def place_into_rect(self, target):
        """
        Map the bound rect onto target, scaling each axis independently.

        A target whose `from_` corner lies right of (or below) its `to`
        corner mirrors the shape on that axis first. A zero source or target
        dimension is treated as 1 for the scale ratio, giving 1:1 on that axis.
        The target rectangle is not modified.
        """
        tracer = get_tracer()

        if target.is_flipped_x():
            self.mirror("horiz")
        if target.is_flipped_y():
            self.mirror("vert")

        target = target.clone().normalize()
        bound = self.get_bound_rect()
        dx, dy = bound.from_.delta_to(target.from_)
        self.move(dx, dy)

        tw, th = target.get_width(), target.get_height()
        bw, bh = bound.get_width(), bound.get_height()
        if 0 in (tw, th, bw, bh):
            tracer.event("Degenerate placement dimension replaced by 1", level="DEBUG",
                         target=target, bound=bound)

        sx = (tw or 1) / (bw or 1)
        sy = (th or 1) / (bh or 1)
        self.scale(sx, sy, target.from_)
        return self

    def place_around_point(self, pt, dist):
        """Fit into the square of half-size dist centered on pt."""
        return self.place_into_rect(Rectangle().place_around_point(pt, dist))
