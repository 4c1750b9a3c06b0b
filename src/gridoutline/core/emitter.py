"""SVG path data emission.

Turns resolved corners into ``M``/``L``/``A``/``Z`` commands. Numbers are
rounded to a fixed precision and written with minimal digits, so equal
inputs always give byte-identical output.
"""

from gridoutline.domain import Corner, Point

# Decimal places kept in emitted coordinates
PRECISION = 4

# Arc sweep flags: 1 bends the arc away from the filled area, 0 into it
SWEEP_CONVEX = 1
SWEEP_CONCAVE = 0


def format_number(value: float) -> str:
    """Format a coordinate with fixed precision and minimal digits.

    Examples:
        >>> format_number(0.25)
        '0.25'
        >>> format_number(2.0)
        '2'
        >>> format_number(-0.00001)
        '0'
    """
    text = f"{round(value, PRECISION):.{PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


class PathEmitter:
    """Writes path data for contours and fillet fragments.

    Attributes:
        scale_x: Horizontal scale applied to coordinates and arc radii
        scale_y: Vertical scale applied to coordinates and arc radii
    """

    def __init__(self, scale_x: float = 1.0, scale_y: float = 1.0) -> None:
        self.scale_x = scale_x
        self.scale_y = scale_y

    def point(self, p: Point) -> str:
        """Format a grid point as scaled ``x y``."""
        scaled = p.scaled(self.scale_x, self.scale_y)
        return f"{format_number(scaled.x)} {format_number(scaled.y)}"

    def move_to(self, p: Point) -> str:
        return f"M{self.point(p)}"

    def line_to(self, p: Point) -> str:
        return f"L{self.point(p)}"

    def arc_to(self, radius: float, sweep: int, p: Point) -> str:
        """Elliptical arc with per-axis scaled radii, no rotation, small arc."""
        rx = format_number(radius * self.scale_x)
        ry = format_number(radius * self.scale_y)
        return f"A{rx} {ry} 0 0 {sweep} {self.point(p)}"

    def emit(self, corners: list[Corner]) -> str:
        """Emit one closed sub-path for a contour's corners.

        The path starts at the first corner's departure point, visits every
        other corner in order and finishes with the first corner's arc.
        Zero-radius corners become plain line joins.

        Args:
            corners: Corners in traversal order, radii already resolved

        Returns:
            Sub-path string, or "" when there are no corners
        """
        if not corners:
            return ""

        first = corners[0]
        segs = [self.move_to(first.departure if first.radius > 0 else first.vertex)]

        for step in range(len(corners)):
            corner = corners[(step + 1) % len(corners)]
            if corner.radius > 0:
                sweep = SWEEP_CONVEX if corner.convex else SWEEP_CONCAVE
                segs.append(self.line_to(corner.arrival))
                segs.append(self.arc_to(corner.radius, sweep, corner.departure))
            else:
                segs.append(self.line_to(corner.vertex))

        segs.append("Z")
        return " ".join(segs)

    def emit_fragment(self, vertex: Point, leg: Point, radius: float, end: Point) -> str:
        """Emit a closed fillet fragment: vertex, straight leg, arc, close.

        The arc bows back towards the vertex, so the fragment is the concave
        crescent left between the two legs and a circle centred on the far
        corner of the leg square.
        """
        return (
            f"{self.move_to(vertex)}{self.line_to(leg)}"
            f"{self.arc_to(radius, SWEEP_CONCAVE, end)}Z"
        )
