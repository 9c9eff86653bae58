"""
Standalone SVG document export.

Wraps one or more Paths into an svgwrite Drawing whose viewBox is the union
bound rect of the paths plus a margin.
"""

import os

import svgwrite

from pathgeom.config import DocumentConfig
from pathgeom.geometry.group import PathGroup
from pathgeom.svg.serializer import serialize_path
from pathgeom.tracer import get_tracer, trace


@trace(label="build_svg_document")
def build_svg_document(paths, config=None, precision=3):
    """
    Create an SVG document containing all paths.

    Args:
        paths: list of Path objects
        config: DocumentConfig for stroke/fill styling and margin
        precision: decimal places for path data

    Returns:
        svgwrite.Drawing object
    """
    tracer = get_tracer()
    config = config or DocumentConfig()

    bound = PathGroup(paths).get_bound_rect()
    if bound is None:
        min_x = min_y = 0.0
        width = height = 0.0
    else:
        min_x, min_y = bound.from_.x, bound.from_.y
        width, height = bound.get_width(), bound.get_height()

    margin = config.margin
    vb_width = width + 2 * margin
    vb_height = height + 2 * margin

    dwg = svgwrite.Drawing(size=(f"{vb_width:g}px", f"{vb_height:g}px"))
    dwg.viewbox(min_x - margin, min_y - margin, vb_width, vb_height)

    group = dwg.g(id="paths", fill=config.fill, stroke=config.stroke_color,
                  stroke_width=config.stroke_width)

    for index, path in enumerate(paths):
        d = serialize_path(path, precision=precision)
        if d:
            group.add(dwg.path(d=d, id=f"path{index}"))

    dwg.add(group)

    tracer.event(f"SVG document built with {len(paths)} paths")

    return dwg


def save_svg_document(dwg, path):
    """Write a Drawing to disk, creating the parent directory."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(dwg.tostring())
