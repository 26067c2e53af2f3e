"""Collections of points, lines and texts in data coordinates."""

from zcalc.shapes import Color, Line, Point, Text


class Plot:
    """Shapes to be drawn, in arbitrary data coordinates."""

    def __init__(self):
        self.points = []
        self.lines = []
        self.texts = []

    def add_point(self, x, y, r=1.0, stroke_width=1.0, fill=Color.RED, stroke=Color.RED):
        self.points.append(
            Point(stroke_color=stroke, fill_color=fill, stroke_width=stroke_width, x=x, y=y, r=r)
        )

    def add_line(self, x0, y0, x1, y1, stroke_width=1.0, stroke=Color.BLACK):
        self.lines.append(
            Line(stroke_color=stroke, stroke_width=stroke_width, x0=x0, y0=y0, x1=x1, y1=y1)
        )

    def add_text(self, text, x, y, font_size=12, fill=Color.BLACK):
        self.texts.append(Text(fill_color=fill, x=x, y=y, font_size=font_size, text=text))

    def clear(self):
        self.points.clear()
        self.lines.clear()
        self.texts.clear()

    def bounds(self):
        """Return ``(min_x, min_y, max_x, max_y)`` over points and lines.

        Returns None when the plot has no points.
        """
        if not self.points:
            return None
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        for line in self.lines:
            xs += (line.x0, line.x1)
            ys += (line.y0, line.y1)
        return min(xs), min(ys), max(xs), max(ys)

    def normalize(self, x0, x1, y0, y1):
        """Scale every shape so that points and lines span ``[x0, x1] x [y0, y1]``."""
        bounds = self.bounds()
        if bounds is None:
            return
        min_x, min_y, max_x, max_y = bounds
        range_x = max_x - min_x
        range_y = max_y - min_y

        def scale_x(value):
            return x0 + ((value - min_x) * (x1 - x0)) / range_x

        def scale_y(value):
            return y0 + ((value - min_y) * (y1 - y0)) / range_y

        for point in self.points:
            point.x, point.y = scale_x(point.x), scale_y(point.y)
        for line in self.lines:
            line.x0, line.y0 = scale_x(line.x0), scale_y(line.y0)
            line.x1, line.y1 = scale_x(line.x1), scale_y(line.y1)
        for text in self.texts:
            text.x, text.y = scale_x(text.x), scale_y(text.y)