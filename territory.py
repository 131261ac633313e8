"""
Territory records and the point-in-polygon hit test used to resolve clicks.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import config as C

Point = Tuple[float, float]


@dataclass(frozen=True)
class Territory:
    """
    A named polygonal region on the map.

    Attributes:
        name: Display label
        vertices: Closed polygon outline, edge i runs from vertex i to vertex i+1 (wrapping)
        owner: Id of the controlling player, only used for display color
        armies: Army count, display only
    """
    name: str
    vertices: Tuple[Point, ...]
    owner: int = 0
    armies: int = 0

    def contains(self, point: Sequence[float]) -> bool:
        """
        Even-odd ray casting: cast a ray to the right of the point and
        toggle on every edge it crosses.
        Points exactly on an edge may land either way, but always the same way.
        """
        px, py = point[0], point[1]
        inside = False
        j = len(self.vertices) - 1
        for i in range(len(self.vertices)):
            xi, yi = self.vertices[i]
            xj, yj = self.vertices[j]
            if (yi > py) != (yj > py):
                cross_x = xj + (py - yj) / (yi - yj) * (xi - xj)
                if cross_x > px:
                    inside = not inside
            j = i
        return inside

    def color(self, selected: bool = False):
        if selected:
            return C.HIGHLIGHT_COLOR
        return C.OWNER_COLORS.get(self.owner, C.FALLBACK_OWNER_COLOR)

    def edges(self) -> List[Tuple[Point, Point]]:
        """Outline segments in drawing order"""
        n = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def overlay_lines(self) -> List[str]:
        return [f"Selected: {self.name}", f"Armies: {self.armies}"]

    def __repr__(self):
        return f"Territory({self.name}, owner={self.owner}, armies={self.armies}, vertices={len(self.vertices)})"
