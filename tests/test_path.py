"""Tests for Path transforms, bounds and shape generators."""

import math

import numpy as np
import pytest

from pathgeom.geometry.bounds import cubic_hull_points, sample_segment
from pathgeom.geometry.matrix import Matrix
from pathgeom.geometry.path import Path
from pathgeom.geometry.point import Point


def _all_coords(path):
    """Anchor and control coordinates in storage order."""
    coords = []
    for p in path.points:
        coords.append((p.x, p.y))
        if p.prev is not None:
            coords.append((p.prev.x, p.prev.y))
        if p.next is not None:
            coords.append((p.next.x, p.next.y))
    return np.array(coords)


def _assert_sampled_inside(path, steps=100):
    rect = path.get_bound_rect()
    eps = 1e-9
    for start, end in path.segments():
        samples = sample_segment(start, end, steps)
        assert np.all(samples[:, 0] >= rect.from_.x - eps)
        assert np.all(samples[:, 0] <= rect.to.x + eps)
        assert np.all(samples[:, 1] >= rect.from_.y - eps)
        assert np.all(samples[:, 1] <= rect.to.y + eps)


class TestTransforms:
    """Transforms must move control points rigidly with their anchors."""

    def test_move_moves_controls(self, cubic_path):
        before = _all_coords(cubic_path)
        cubic_path.move(3, -2)
        assert np.allclose(_all_coords(cubic_path), before + [3, -2])

    def test_move_dir(self, cubic_path):
        before = _all_coords(cubic_path)
        cubic_path.move_dir(5, 0)
        assert np.allclose(_all_coords(cubic_path), before + [5, 0])

    def test_rotate_keeps_distances(self, mixed_path):
        pivot = Point(3, 4)
        before = _all_coords(mixed_path)
        mixed_path.rotate(0.7, pivot)
        after = _all_coords(mixed_path)
        d_before = np.hypot(*(before - [3, 4]).T)
        d_after = np.hypot(*(after - [3, 4]).T)
        assert np.allclose(d_before, d_after)

    def test_rotate_with_own_point_as_pivot(self, unit_square):
        pivot = unit_square.points[0]
        unit_square.rotate(math.pi, pivot)
        assert unit_square.points[2].x == pytest.approx(-1)
        assert unit_square.points[2].y == pytest.approx(-1)

    def test_scale_controls(self, quadratic_path):
        quadratic_path.scale(2, 3, Point(0, 0))
        end = quadratic_path.points[1]
        assert (end.x, end.y) == (20, 0)
        assert (end.prev.x, end.prev.y) == (10, -24)

    def test_matrix_transform_matches_point_transform(self, mixed_path):
        m = Matrix(1.5, 0.2, -0.3, 0.8, 4, -1)
        expected = np.array([m.apply(x, y) for x, y in _all_coords(mixed_path)])
        mixed_path.matrix_transform(m)
        assert np.allclose(_all_coords(mixed_path), expected)

    def test_transforms_chain(self, unit_square):
        assert unit_square.move(1, 1).scale(2, 2, Point(0, 0)) is unit_square
        assert (unit_square.points[0].x, unit_square.points[0].y) == (2, 2)


class TestBoundRect:
    """Tests for curve-aware bounding rectangles."""

    def test_straight_path(self, unit_square):
        assert unit_square.get_bound_rect().as_tuple() == (0, 0, 1, 1)

    def test_empty_path_returns_none(self):
        assert Path().get_bound_rect() is None

    def test_single_point(self):
        rect = Path([Point(2, 3)]).get_bound_rect()
        assert rect.as_tuple() == (2, 3, 2, 3)

    def test_cubic_bulge_included(self, cubic_path):
        rect = cubic_path.get_bound_rect()
        # the true curve peaks at y=7.5
        assert rect.to.y >= 7.5
        # one subdivision step stays inside the control hull
        assert rect.to.y <= 10
        assert rect.from_.y == 0

    def test_quadratic_bulge_included(self, quadratic_path):
        rect = quadratic_path.get_bound_rect()
        # true minimum is -4, the leg midpoints reach -4 as well
        assert rect.from_.y == pytest.approx(-4)
        assert rect.to.y == 0

    def test_sampled_curves_inside(self, cubic_path, quadratic_path, mixed_path):
        for path in (cubic_path, quadratic_path, mixed_path):
            _assert_sampled_inside(path)

    def test_random_curves_inside(self):
        rng = np.random.default_rng(7)
        for _ in range(25):
            pts = rng.uniform(-50, 50, size=(4, 2))
            path = Path([
                Point(*pts[0], next=Point(*pts[1])),
                Point(*pts[3], prev=Point(*pts[2])),
            ])
            _assert_sampled_inside(path)

    def test_anchors_inside(self, mixed_path):
        rect = mixed_path.get_bound_rect()
        for p in mixed_path.points:
            assert rect.contains(p)

    def test_cubic_hull_points_are_de_casteljau(self):
        pts = cubic_hull_points((0, 0), (0, 4), (4, 4), (4, 0))
        assert pts[-1] == (2, 3)
        assert len(pts) == 6

    def test_tight_bound_rect(self, cubic_path):
        rect = cubic_path.get_tight_bound_rect(steps=100)
        assert rect.to.y == pytest.approx(7.5, abs=1e-3)
        assert rect.to.y <= cubic_path.get_bound_rect().to.y

    def test_get_center(self, unit_square):
        c = unit_square.get_center()
        assert (c.x, c.y) == (0.5, 0.5)


class TestSegments:
    """Tests for segment enumeration and flattening."""

    def test_move_to_breaks_segments(self, mixed_path):
        pairs = list(mixed_path.segments())
        assert len(pairs) == 4
        assert all(not end.is_move_to for _, end in pairs)

    def test_closed_adds_closing_segment(self, unit_square):
        pairs = list(unit_square.segments())
        assert len(pairs) == 4
        assert pairs[-1][1] is unit_square.points[0]

    def test_flatten_per_subpath(self, mixed_path):
        polylines = mixed_path.flatten(steps=10)
        assert len(polylines) == 2
        # 1 start + line + cubic(10) + quadratic(10)
        assert polylines[0].shape == (22, 2)
        assert np.allclose(polylines[1], [[40, 40], [45, 42]])

    def test_flatten_closed(self, unit_square):
        polyline = unit_square.flatten()[0]
        assert np.allclose(polyline[0], polyline[-1])

    def test_anchors_array(self, unit_square):
        arr = unit_square.anchors_array()
        assert arr.shape == (4, 2)
        assert np.allclose(arr[2], [1, 1])
        assert Path().anchors_array().shape == (0, 2)


class TestClone:
    """Clones must not share geometry."""

    def test_clone_independent(self, mixed_path):
        copy = mixed_path.clone()
        copy.move(100, 100)
        assert mixed_path.points[1].next.x == 12
        assert copy.points[1].next.x == 112
        for a, b in zip(mixed_path.points, copy.points):
            assert a is not b

    def test_clone_keeps_flags(self, mixed_path):
        mixed_path.closed = True
        copy = mixed_path.clone()
        assert copy.closed
        assert [p.is_move_to for p in copy.points] == [p.is_move_to for p in mixed_path.points]


class TestShapes:
    """Tests for parametric shape generators."""

    def test_ellipse_bounds(self):
        path = Path().ellipse(Point(0, 0), 10, 10)
        assert path.closed
        assert len(path.points) == 4
        rect = path.get_bound_rect()
        assert rect.as_tuple() == pytest.approx((-10, -10, 10, 10))
        _assert_sampled_inside(path)

    def test_ellipse_controls(self):
        path = Path().ellipse(Point(1, 2), 4, 6)
        top = path.points[0]
        assert (top.x, top.y) == (1, -2)
        assert (top.prev.x, top.prev.y) == (-2, -2)
        assert (top.next.x, top.next.y) == (4, -2)
        assert all(p.prev is not None and p.next is not None for p in path.points)

    def test_star_alternates_radius(self):
        path = Path().star(Point(0, 0), 10, 5, 5, 0)
        assert path.closed
        assert len(path.points) == 10
        dists = [math.hypot(p.x, p.y) for p in path.points]
        assert dists[0::2] == pytest.approx([10] * 5)
        assert dists[1::2] == pytest.approx([5] * 5)

    def test_star_angle_offset(self):
        plain = Path().star(Point(0, 0), 10, 5, 4, 0)
        turned = Path().star(Point(0, 0), 10, 5, 4, 0.1)
        assert plain.points[0] == turned.points[0]
        a = math.atan2(plain.points[1].x, plain.points[1].y)
        b = math.atan2(turned.points[1].x, turned.points[1].y)
        assert b - a == pytest.approx(0.1)

    def test_generator_replaces_contents(self, unit_square):
        unit_square.star(Point(0, 0), 2, 1, 3)
        assert len(unit_square.points) == 6
