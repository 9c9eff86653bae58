"""
SVG path data parser.

A cursor walks the token list; each command letter is looked up in a
dispatch table and its handler consumes coordinate groups until the next
token is a command letter, so implicit repetition ("L 1 2 3 4") works for
every command. Lowercase commands are relative to the current point.

Elliptical arcs (A/a) are not converted: their seven parameters are read,
the current point moves to the arc end, and no point is emitted.
"""

from functools import partial

from pathgeom.errors import InvalidPathSyntax
from pathgeom.geometry.path import Path
from pathgeom.geometry.point import Point
from pathgeom.svg.tokenizer import is_command, is_number, tokenize
from pathgeom.tracer import get_tracer, trace

CUBIC_COMMANDS = "CcSs"
QUADRATIC_COMMANDS = "QqTt"


class _ParseState:
    """Cursor and running geometry state for one parse."""

    def __init__(self, tokens, path):
        self.tokens = tokens
        self.pos = 0
        self.path = path
        self.cur_x = 0.0
        self.cur_y = 0.0
        self.start_x = 0.0
        self.start_y = 0.0
        # last control point, used for S/T reflection
        self.ctrl_x = 0.0
        self.ctrl_y = 0.0
        self.prev_cmd = None
        self.after_close = False
        self.skipped_arcs = 0

    def at_end(self):
        return self.pos >= len(self.tokens)

    def has_group(self):
        """True while the next token belongs to the current command."""
        return not self.at_end() and not is_command(self.tokens[self.pos])

    def number(self):
        if self.at_end():
            raise InvalidPathSyntax("Unexpected end of path data, coordinate expected",
                                    token=None, position=self.pos)
        token = self.tokens[self.pos]
        if not is_number(token):
            raise InvalidPathSyntax("Invalid coordinate", token=token, position=self.pos)
        self.pos += 1
        return float(token)

    def flag(self):
        """
        Read an arc flag.

        Flags may be packed against following values ("01" or "110,5"), so
        only the first character is consumed from such a token.
        """
        if self.at_end():
            raise InvalidPathSyntax("Unexpected end of path data, arc flag expected",
                                    token=None, position=self.pos)
        token = self.tokens[self.pos]
        if token[:1] not in ("0", "1"):
            raise InvalidPathSyntax("Invalid arc flag", token=token, position=self.pos)
        if len(token) == 1:
            self.pos += 1
        else:
            self.tokens[self.pos] = token[1:]
        return token[0] == "1"

    def coord(self, relative):
        """Read an x,y pair, resolved against the current point."""
        x = self.number()
        y = self.number()
        if relative:
            return self.cur_x + x, self.cur_y + y
        return x, y

    def last_point(self):
        """
        Point the next segment starts from.

        Right after a closepath, or before any point exists, a move-to point
        is synthesised at the current position.
        """
        points = self.path.points
        if self.after_close or not points:
            points.append(Point(self.cur_x, self.cur_y, is_move_to=True))
            self.after_close = False
        return points[-1]

    def add_point(self, x, y, prev=None):
        self.last_point()
        self.cur_x, self.cur_y = x, y
        pt = Point(x, y, prev=prev)
        self.path.points.append(pt)
        return pt


def _moveto(state, relative):
    x, y = state.coord(relative)
    state.cur_x, state.cur_y = x, y
    state.start_x, state.start_y = x, y
    state.path.points.append(Point(x, y, is_move_to=True))
    state.after_close = False

    # extra pairs are implicit linetos
    while state.has_group():
        state.add_point(*state.coord(relative))


def _lineto(state, relative):
    while state.has_group():
        state.add_point(*state.coord(relative))


def _axis_lineto(state, relative, axis):
    while state.has_group():
        value = state.number()
        x, y = state.cur_x, state.cur_y
        if axis == "x":
            x = x + value if relative else value
        else:
            y = y + value if relative else value
        state.add_point(x, y)


def _cubic(state, relative, smooth):
    reflects = CUBIC_COMMANDS
    while state.has_group():
        start = state.last_point()
        if not smooth:
            cx1, cy1 = state.coord(relative)
        elif state.prev_cmd is not None and state.prev_cmd in reflects:
            cx1, cy1 = 2 * state.cur_x - state.ctrl_x, 2 * state.cur_y - state.ctrl_y
        else:
            cx1, cy1 = state.cur_x, state.cur_y

        cx2, cy2 = state.coord(relative)
        x, y = state.coord(relative)

        start.next = Point(cx1, cy1)
        state.add_point(x, y, prev=Point(cx2, cy2))
        state.ctrl_x, state.ctrl_y = cx2, cy2
        state.prev_cmd = "S" if smooth else "C"


def _quadratic(state, relative, smooth):
    reflects = QUADRATIC_COMMANDS
    while state.has_group():
        if not smooth:
            cx, cy = state.coord(relative)
        elif state.prev_cmd is not None and state.prev_cmd in reflects:
            cx, cy = 2 * state.cur_x - state.ctrl_x, 2 * state.cur_y - state.ctrl_y
        else:
            cx, cy = state.cur_x, state.cur_y

        x, y = state.coord(relative)
        state.add_point(x, y, prev=Point(cx, cy))
        state.ctrl_x, state.ctrl_y = cx, cy
        state.prev_cmd = "T" if smooth else "Q"


def _arc(state, relative):
    while state.has_group():
        for _ in range(3):
            state.number()  # rx, ry, x-axis-rotation
        state.flag()
        state.flag()
        state.cur_x, state.cur_y = state.coord(relative)
        state.skipped_arcs += 1


def _closepath(state, relative):
    state.path.closed = True
    state.cur_x, state.cur_y = state.start_x, state.start_y
    state.after_close = True


COMMAND_HANDLERS = {
    "M": partial(_moveto, relative=False),
    "m": partial(_moveto, relative=True),
    "L": partial(_lineto, relative=False),
    "l": partial(_lineto, relative=True),
    "H": partial(_axis_lineto, relative=False, axis="x"),
    "h": partial(_axis_lineto, relative=True, axis="x"),
    "V": partial(_axis_lineto, relative=False, axis="y"),
    "v": partial(_axis_lineto, relative=True, axis="y"),
    "C": partial(_cubic, relative=False, smooth=False),
    "c": partial(_cubic, relative=True, smooth=False),
    "S": partial(_cubic, relative=False, smooth=True),
    "s": partial(_cubic, relative=True, smooth=True),
    "Q": partial(_quadratic, relative=False, smooth=False),
    "q": partial(_quadratic, relative=True, smooth=False),
    "T": partial(_quadratic, relative=False, smooth=True),
    "t": partial(_quadratic, relative=True, smooth=True),
    "A": partial(_arc, relative=False),
    "a": partial(_arc, relative=True),
    "Z": partial(_closepath, relative=False),
    "z": partial(_closepath, relative=True),
}


@trace(label="parse_path")
def parse_into(path, d):
    """
    Parse SVG path data into an existing Path, replacing its contents.

    Raises:
        InvalidPathSyntax: on a malformed or unknown token. The path is left
            partially filled and should be discarded.
    """
    tracer = get_tracer()

    path.points = []
    path.closed = False
    state = _ParseState(tokenize(d), path)

    while not state.at_end():
        token = state.tokens[state.pos]
        handler = COMMAND_HANDLERS.get(token)
        if handler is None:
            message = "Unknown command" if is_command(token) else "Expected a command"
            raise InvalidPathSyntax(message, token=token, position=state.pos)

        state.pos += 1
        handler(state)
        state.prev_cmd = token.upper()

    if state.skipped_arcs:
        tracer.event("Elliptical arc segments skipped", level="WARN", count=state.skipped_arcs)

    tracer.event(f"Parsed {len(path.points)} points", level="DEBUG", closed=path.closed)

    return path


def parse_path(d):
    """Parse SVG path data into a new Path."""
    return parse_into(Path(), d)
