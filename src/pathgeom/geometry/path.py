"""
Path: an ordered point sequence with optional curve controls.

Segment order is point order. A point flagged `is_move_to` starts a new
subpath and is not connected to its predecessor. When `closed` is set, an
implicit segment joins the last point back to the start of its subpath.

Segment type is never stored: it follows from which controls are set on the
two points bounding a segment (`start.next`, `end.prev`).
"""

import numpy as np

from pathgeom.geometry.bounds import sample_segment, segment_hull_points
from pathgeom.geometry.placement import Placeable
from pathgeom.geometry.point import Point
from pathgeom.geometry.rectangle import Rectangle
from pathgeom.geometry.shapes import ellipse_points, star_points


class Path(Placeable):
    """Open or closed polyline with straight, quadratic and cubic segments."""

    def __init__(self, points=None, closed=False):
        self.points = points if points is not None else []
        self.closed = closed

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"Path(points={len(self.points)}, closed={self.closed})"

    def _each_point(self, op):
        """Apply op to every anchor and its control points."""
        for p in self.points:
            op(p)
            if p.prev is not None:
                op(p.prev)
            if p.next is not None:
                op(p.next)
        return self

    # Transforms. Pivots are copied first so a pivot aliasing one of this
    # path's own points stays fixed during the pass.

    def move(self, dx, dy):
        return self._each_point(lambda p: p.move(dx, dy))

    def move_dir(self, dist, angle):
        return self._each_point(lambda p: p.move_dir(dist, angle))

    def rotate(self, angle, pivot):
        pivot = Point(pivot.x, pivot.y)
        return self._each_point(lambda p: p.rotate(angle, pivot))

    def scale(self, sc_x, sc_y, pivot):
        pivot = Point(pivot.x, pivot.y)
        return self._each_point(lambda p: p.scale(sc_x, sc_y, pivot))

    def matrix_transform(self, m):
        return self._each_point(lambda p: p.matrix_transform(m))

    def subpath_starts(self):
        """Indices where subpaths begin."""
        return [i for i, p in enumerate(self.points) if i == 0 or p.is_move_to]

    def segments(self):
        """
        Yield (start, end) point pairs for every drawn segment.

        Includes the closing segment when the path is closed.
        """
        pts = self.points
        for i in range(1, len(pts)):
            if not pts[i].is_move_to:
                yield pts[i - 1], pts[i]

        if self.closed and len(pts) > 1:
            start = pts[self.subpath_starts()[-1]]
            if start is not pts[-1]:
                yield pts[-1], start

    def get_bound_rect(self):
        """
        Bounding rectangle of the path, curves included.

        Curved segments contribute conservative hull points, so the result
        may be slightly larger than the drawn curve but always contains it.
        The path must not be empty; None is returned if it is.
        """
        if not self.points:
            return None

        first = self.points[0]
        min_x = max_x = first.x
        min_y = max_y = first.y

        for p in self.points:
            min_x, max_x = min(min_x, p.x), max(max_x, p.x)
            min_y, max_y = min(min_y, p.y), max(max_y, p.y)

        for start, end in self.segments():
            for x, y in segment_hull_points(start, end):
                min_x, max_x = min(min_x, x), max(max_x, x)
                min_y, max_y = min(min_y, y), max(max_y, y)

        return Rectangle.from_bounds(min_x, min_y, max_x, max_y)

    def get_tight_bound_rect(self, steps=100):
        """Bounding rectangle of the sampled curve; tighter but approximate."""
        polylines = self.flatten(steps)
        if not polylines:
            return None
        coords = np.vstack(polylines)
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return Rectangle.from_bounds(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

    def flatten(self, steps=100):
        """
        Sample the path into polylines, one numpy (n, 2) array per subpath.

        Straight segments contribute only their endpoints.
        """
        polylines = []
        current = []
        starts = set(self.subpath_starts())

        for i, p in enumerate(self.points):
            if i in starts:
                if current:
                    polylines.append(np.array(current))
                current = [[p.x, p.y]]
                continue
            prev = self.points[i - 1]
            seg_steps = steps if (prev.next is not None or p.prev is not None) else 1
            current.extend(sample_segment(prev, p, seg_steps)[1:].tolist())

        if self.closed and len(self.points) > 1:
            start = self.points[self.subpath_starts()[-1]]
            last = self.points[-1]
            if start is not last:
                seg_steps = steps if (last.next is not None or start.prev is not None) else 1
                current.extend(sample_segment(last, start, seg_steps)[1:].tolist())

        if current:
            polylines.append(np.array(current))
        return polylines

    def anchors_array(self):
        """Anchor coordinates as a numpy (n, 2) array."""
        return np.array([[p.x, p.y] for p in self.points], dtype=float).reshape(-1, 2)

    def clone_points(self):
        return [p.clone() for p in self.points]

    def clone(self):
        """Deep copy; no point or control is shared with the original."""
        return Path(self.clone_points(), self.closed)

    def ellipse(self, center, r1, r2):
        """Replace contents with a closed 4-cubic ellipse."""
        self.points = ellipse_points(center, r1, r2)
        self.closed = True
        return self

    def star(self, center, r1, r2, num_vertices, angle_offset=0.0):
        """Replace contents with a closed star of 2 * num_vertices points."""
        self.points = star_points(center, r1, r2, num_vertices, angle_offset)
        self.closed = True
        return self

    def svg(self, d=None, precision=3):
        """
        Get or set the path as SVG 'd' data.

        With no argument returns the serialized string. With a string, parses
        it into this path (replacing its contents) and returns the path.

        Raises:
            InvalidPathSyntax: if d is malformed
        """
        from pathgeom.svg.parser import parse_into
        from pathgeom.svg.serializer import serialize_path

        if d is None:
            return serialize_path(self, precision=precision)
        parse_into(self, d)
        return self

    @classmethod
    def from_svg(cls, d):
        return cls().svg(d)
