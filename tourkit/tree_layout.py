"""Node and edge geometry for drawing a tree of numbered circles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

__all__ = [
    "Rect",
    "TreeNode",
    "TreeEdge",
    "TreeRenderer",
    "StripVertex",
    "feathered_line_strip",
]

Vec2 = tuple[float, float]
Color = tuple[int, int, int]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Vec2:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)


@dataclass(frozen=True)
class TreeNode:
    """A drawn node: its position, the number it shows and its id."""

    position: Vec2
    value: int
    id: int

    @property
    def label(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TreeEdge:
    """A line from one node id to another."""

    from_id: int
    to_id: int


class StripVertex(NamedTuple):
    """One vertex of a triangle strip; transparent vertices have ``opaque`` false."""

    position: Vec2
    opaque: bool


def feathered_line_strip(
    start: Vec2, end: Vec2, thickness: float = 1.0, feather: float = 1.0
) -> list[StripVertex]:
    """Eight-vertex triangle strip for an anti-aliased line from ``start`` to ``end``.

    The inner band of width ``thickness`` is opaque; a ``feather``-wide band on
    each side fades to transparent. A line of zero length yields no vertices.
    """
    dx, dy = end[0] - start[0], end[1] - start[1]
    length = math.hypot(dx, dy)
    if length == 0:
        return []
    dx, dy = dx / length, dy / length
    nx, ny = -dy, dx
    half = thickness / 2.0
    outer = half + feather

    def shifted(point: Vec2, scale: float) -> Vec2:
        return (point[0] + nx * scale, point[1] + ny * scale)

    layers = ((outer, False), (half, True), (-half, True), (-outer, False))
    return [
        StripVertex(shifted(point, scale), opaque)
        for scale, opaque in layers
        for point in (start, end)
    ]


class TreeRenderer:
    """Collects nodes and edges and works out what to draw for them."""

    def __init__(self, node_radius: float = 25.0) -> None:
        self.node_radius = float(node_radius)
        self.nodes: list[TreeNode] = []
        self.edges: list[TreeEdge] = []

    def add_node(self, position: Vec2, value: int) -> int:
        """Add a node and return its id.

        The stored position is shifted up and left by the node radius.
        """
        r = self.node_radius
        node = TreeNode((position[0] - r, position[1] - r), value, len(self.nodes))
        self.nodes.append(node)
        return node.id

    def add_edge(self, from_id: int, to_id: int) -> bool:
        """Connect two nodes; returns False and adds nothing if either id is unknown."""
        count = len(self.nodes)
        if 0 <= from_id < count and 0 <= to_id < count:
            self.edges.append(TreeEdge(from_id, to_id))
            return True
        return False

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()

    def bounds(self) -> Rect:
        """Box around every node circle, or an empty box when there are none."""
        if not self.nodes:
            return Rect(0.0, 0.0, 0.0, 0.0)
        r = self.node_radius
        first_x, first_y = self.nodes[0].position
        min_x = min([first_x] + [node.position[0] - r for node in self.nodes])
        min_y = min([first_y] + [node.position[1] - r for node in self.nodes])
        max_x = max([first_x] + [node.position[0] + r for node in self.nodes])
        max_y = max([first_y] + [node.position[1] + r for node in self.nodes])
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def node_colors(self, time: float) -> list[Color]:
        """Fill colours of the nodes at ``time`` seconds, one per node.

        Channels wrap into the 0-255 range as byte values do.
        """
        colors = []
        for index, _ in enumerate(self.nodes):
            red = 100 + int(50 * math.sin(time + index))
            green = 150 + int(50 * math.sin(time * 0.7 + index))
            blue = 250 + int(50 * math.sin(time * 0.5 + index))
            colors.append((red % 256, green % 256, blue % 256))
        return colors

    def edge_segments(self) -> list[tuple[Vec2, Vec2]]:
        """Start and end positions of every edge."""
        return [
            (self.nodes[edge.from_id].position, self.nodes[edge.to_id].position)
            for edge in self.edges
        ]