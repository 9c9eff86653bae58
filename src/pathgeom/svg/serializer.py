"""
SVG path data serializer.

Each point becomes one command, chosen from the controls around it:

    M  first point, or any point flagged is_move_to
    C  previous point has `next` and this point has `prev`
    Q  exactly one of those two controls is set
    L  no controls

Coordinates are fixed-point, comma-joined pairs; 'Z' is appended to a closed
path. The exact layout is only guaranteed to round-trip through the parser.
"""

from pathgeom.tracer import trace


def _pair(pt, precision):
    return f"{pt.x:.{precision}f},{pt.y:.{precision}f}"


def _segment(prev, pt, precision):
    cp1 = prev.next
    cp2 = pt.prev

    if cp1 is not None and cp2 is not None:
        return f"C{_pair(cp1, precision)} {_pair(cp2, precision)} {_pair(pt, precision)}"

    if cp1 is not None or cp2 is not None:
        cp = cp2 if cp2 is not None else cp1
        return f"Q{_pair(cp, precision)} {_pair(pt, precision)}"

    return f"L{_pair(pt, precision)}"


@trace(label="serialize_path")
def serialize_path(path, precision=3):
    """
    Serialize a Path to SVG 'd' data.

    Args:
        path: the Path to write
        precision: decimal places per coordinate

    Returns:
        the 'd' string; empty for an empty path
    """
    points = path.points
    if not points:
        return ""

    parts = [f"M{_pair(points[0], precision)}"]
    for i in range(1, len(points)):
        pt = points[i]
        if pt.is_move_to:
            parts.append(f"M{_pair(pt, precision)}")
        else:
            parts.append(_segment(points[i - 1], pt, precision))

    d = " ".join(parts)
    if path.closed:
        d += "Z"
    return d
