"""
Point builders for the parametric shapes a Path can generate.
"""

import math

from pathgeom.geometry.point import Point


def ellipse_points(center, r1, r2):
    """
    Four cubic anchors approximating an ellipse.

    Anchors sit at the top, right, bottom and left extremes, in that order.
    Each carries a prev/next pair offset by half the radius along the
    tangent at that extreme.

    Args:
        center: Point
        r1: vertical radius
        r2: horizontal radius
    """
    x, y = center.x, center.y
    h1 = r1 / 2
    h2 = r2 / 2

    return [
        Point(x, y - r1, prev=Point(x - h2, y - r1), next=Point(x + h2, y - r1)),
        Point(x + r2, y, prev=Point(x + r2, y - h1), next=Point(x + r2, y + h1)),
        Point(x, y + r1, prev=Point(x + h2, y + r1), next=Point(x - h2, y + r1)),
        Point(x - r2, y, prev=Point(x - r2, y + h1), next=Point(x - r2, y - h1)),
    ]


def star_points(center, r1, r2, num_vertices, angle_offset=0.0):
    """
    Straight anchors of a star.

    Returns 2 * num_vertices points alternating radius r1 and r2, stepping by
    2*pi / (2 * num_vertices). Inner (r2) points are turned by angle_offset.
    Angle zero points along +y.
    """
    count = 2 * num_vertices
    if count <= 0:
        return []

    step = 2 * math.pi / count
    points = []
    for i in range(count):
        alfa = i * step
        if i % 2 == 0:
            r, ang = r1, alfa
        else:
            r, ang = r2, alfa + angle_offset
        points.append(Point(center.x + r * math.sin(ang), center.y + r * math.cos(ang)))

    return points
