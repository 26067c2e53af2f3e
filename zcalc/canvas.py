"""An HTML page holding one SVG drawing made of figures."""

import os
from pathlib import Path

from zcalc.figure import Figure


class Canvas:
    """An SVG area at ``(x, y)`` of size ``w`` by ``h`` saved as ``<filename>.html``."""

    def __init__(self, filename, x, y, w, h):
        self.path = Path(f"{os.fspath(filename)}.html")
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.figures = []

    def figure(self, x, y, w, h):
        """Create a figure on the canvas and return it."""
        fig = Figure(x, y, w, h)
        self.figures.append(fig)
        return fig

    def render(self):
        """Return the HTML document with every figure in creation order."""
        head = (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<body>\n"
            f'<svg x="{self.x}" y="{self.y}" height="{self.h}" width="{self.w}">\n'
        )
        body = "".join(fig.text for fig in self.figures)
        return head + body + "</svg>\n</body>\n</html>\n"

    def plot(self):
        """Write the document to the canvas file and return its path."""
        self.path.write_text(self.render(), encoding="utf-8")
        return self.path