"""A rectangular area of an SVG document into which plots are drawn."""

from xml.sax.saxutils import escape

from zcalc.shapes import Color, Line, color_to_hex


def _num(value):
    return f"{float(value):f}"


class Figure:
    """An SVG region at ``(x, y)`` of size ``w`` by ``h`` with a black frame."""

    def __init__(self, x, y, w, h):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self._parts = []
        frame = [
            (x, y, x, y + h),
            (x, y + h, x + w, y + h),
            (x + w, y + h, x + w, y),
            (x + w, y, x, y),
        ]
        for x0, y0, x1, y1 in frame:
            self.draw_line(
                Line(stroke_color=Color.BLACK, stroke_width=2, x0=x0, y0=y0, x1=x1, y1=y1)
            )

    def draw_line(self, line):
        self._parts.append(
            f'<line x1="{_num(line.x0)}" y1="{_num(line.y0)}" '
            f'x2="{_num(line.x1)}" y2="{_num(line.y1)}" '
            f'stroke="{color_to_hex(line.stroke_color)}" '
            f'stroke-width="{_num(line.stroke_width)}"/>\n'
        )

    def draw_point(self, point):
        self._parts.append(
            f'<circle cx="{_num(point.x)}" cy="{_num(point.y)}" r="{_num(point.r)}" '
            f'stroke="{color_to_hex(point.stroke_color)}" '
            f'fill="{color_to_hex(point.fill_color)}" '
            f'stroke-width="{_num(point.stroke_width)}"/>\n'
        )

    def draw_text(self, text):
        self._parts.append(
            f'<text x="{_num(text.x)}" y="{_num(text.y)}" '
            f'font-size="{int(text.font_size)}" '
            f'fill="{color_to_hex(text.fill_color)}">{escape(text.text)}</text>\n'
        )

    @property
    def text(self):
        """The SVG markup drawn so far."""
        return "".join(self._parts)

    def _mirror_y(self, y):
        # SVG y coordinates grow downwards, so flip around the figure's centre.
        centre = self.y + self.h / 2.0
        return centre + (centre - y)

    def plot(self, plot):
        """Fit ``plot`` into the figure and draw its lines, texts and points."""
        plot.normalize(self.x, self.x + self.w, self.y, self.y + self.h)
        for point in plot.points:
            point.y = self._mirror_y(point.y)
        for line in plot.lines:
            line.y0 = self._mirror_y(line.y0)
            line.y1 = self._mirror_y(line.y1)
        for text in plot.texts:
            text.y = self._mirror_y(text.y)

        for line in plot.lines:
            self.draw_line(line)
        for text in plot.texts:
            self.draw_text(text)
        for point in plot.points:
            self.draw_point(point)