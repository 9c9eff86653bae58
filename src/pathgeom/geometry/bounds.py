"""
Curve-aware bounding helpers.

A bezier segment can bulge past its anchors, so the bound rect of a Path
also scans a few points derived from each curved segment's control polygon.
The points come from one level of De Casteljau subdivision: every one is a
convex combination of the control polygon, so the result always contains the
curve while staying cheap. It is a conservative bound, not a tight one.
"""

import numpy as np


def _mid(p, q):
    return ((p[0] + q[0]) / 2, (p[1] + q[1]) / 2)


def cubic_hull_points(p0, cp1, cp2, p1):
    """
    One De Casteljau step on a cubic at t=0.5.

    Args:
        p0, cp1, cp2, p1: (x, y) tuples of the control polygon

    Returns:
        list of the six constructed points
    """
    m01 = _mid(p0, cp1)
    m12 = _mid(cp1, cp2)
    m23 = _mid(cp2, p1)
    m012 = _mid(m01, m12)
    m123 = _mid(m12, m23)
    return [m01, m12, m23, m012, m123, _mid(m012, m123)]


def quadratic_hull_points(p0, cp, p1):
    """Midpoints of the two legs of a quadratic control polygon."""
    return [_mid(p0, cp), _mid(cp, p1)]


def segment_hull_points(start, end):
    """
    Extra points bounding the segment from start to end.

    The segment is cubic when start.next and end.prev are both set, quadratic
    when exactly one of them is, and straight (no extra points) otherwise.
    """
    cp1 = start.next
    cp2 = end.prev

    if cp1 is None and cp2 is None:
        return []

    p0 = (start.x, start.y)
    p1 = (end.x, end.y)

    if cp1 is not None and cp2 is not None:
        return cubic_hull_points(p0, (cp1.x, cp1.y), (cp2.x, cp2.y), p1)

    cp = cp1 if cp1 is not None else cp2
    return quadratic_hull_points(p0, (cp.x, cp.y), p1)


def _bernstein(n, i, t):
    """Bernstein basis polynomial B_i,n(t) for n in (2, 3)."""
    if n == 3:
        return [(1 - t) ** 3, 3 * (1 - t) ** 2 * t, 3 * (1 - t) * t ** 2, t ** 3][i]
    return [(1 - t) ** 2, 2 * (1 - t) * t, t ** 2][i]


def sample_segment(start, end, steps):
    """
    Sample the analytic segment from start to end.

    Args:
        start, end: Points; their `next`/`prev` controls select the curve type
        steps: number of intervals; steps + 1 samples are returned

    Returns:
        numpy array of shape (steps + 1, 2), including both endpoints
    """
    t = np.linspace(0.0, 1.0, steps + 1)[:, None]
    p0 = np.array([start.x, start.y])
    p1 = np.array([end.x, end.y])
    cp1 = start.next
    cp2 = end.prev

    if cp1 is not None and cp2 is not None:
        ctrl = [p0, np.array([cp1.x, cp1.y]), np.array([cp2.x, cp2.y]), p1]
        return sum(_bernstein(3, i, t) * ctrl[i] for i in range(4))

    if cp1 is not None or cp2 is not None:
        cp = cp1 if cp1 is not None else cp2
        ctrl = [p0, np.array([cp.x, cp.y]), p1]
        return sum(_bernstein(2, i, t) * ctrl[i] for i in range(3))

    return p0 + t * (p1 - p0)
