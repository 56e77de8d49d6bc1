"""Zoomable, pannable 2D views mapping window pixels to content coordinates."""

from __future__ import annotations

from tourkit.tree_layout import Rect

__all__ = ["View", "CanvasView"]

Vec2 = tuple[float, float]


class View:
    """A content view and a UI view over a window area of ``view_size`` pixels.

    ``initial_size`` is the size of the content area; zoom is relative to
    how well that area fits the window.
    """

    def __init__(
        self,
        initial_size: Vec2,
        view_size: Vec2,
        view_position: Vec2 = (0.0, 0.0),
        min_zoom: float = 0.1,
        max_zoom: float = 5.0,
    ) -> None:
        self.initial_size = (float(initial_size[0]), float(initial_size[1]))
        self.view_size = (float(view_size[0]), float(view_size[1]))
        self.view_position = (float(view_position[0]), float(view_position[1]))
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self.zoom = 1.0
        self.view_offset: Vec2 = (0.0, 0.0)
        self.content_center: Vec2 = (
            self.view_position[0] + self.initial_size[0] / 2.0,
            self.view_position[1] + self.initial_size[1] / 2.0,
        )
        self.content_size: Vec2 = self.initial_size
        self.ui_center: Vec2 = self.content_center
        self.ui_size: Vec2 = self.content_size
        self._effective_zoom = 1.0
        self.effective_zoom()

    def effective_zoom(self) -> float:
        """Zoom scaled by how much the window shrinks the content area."""
        scale_x = self.view_size[0] / self.initial_size[0]
        scale_y = self.view_size[1] / self.initial_size[1]
        self._effective_zoom = self.zoom / min(scale_x, scale_y)
        return self._effective_zoom

    def max_offset(self) -> Vec2:
        """How far the content can be scrolled on each axis."""
        zoom = self.effective_zoom()
        visible_x = self.view_size[0] / zoom
        visible_y = self.view_size[1] / zoom
        return (
            max(0.0, self.initial_size[0] - visible_x),
            max(0.0, self.initial_size[1] - visible_y),
        )

    def map_pixel_to_coords(self, pixel: Vec2) -> Vec2:
        """Content coordinates shown at a window pixel."""
        fx = pixel[0] / self.view_size[0] - 0.5
        fy = pixel[1] / self.view_size[1] - 0.5
        return (
            self.content_center[0] + fx * self.content_size[0],
            self.content_center[1] + fy * self.content_size[1],
        )

    def set_zoom(self, factor: float, focus_point: Vec2) -> None:
        """Zoom in by 10% for a positive ``factor``, otherwise out by 10%.

        A step that would leave the zoom limits is ignored.
        """
        new_zoom = self.zoom * (1.1 if factor > 0 else 0.9)
        if new_zoom < self.min_zoom or new_zoom > self.max_zoom:
            return
        before = self.map_pixel_to_coords(focus_point)
        self.zoom = new_zoom
        zoom = self.effective_zoom()
        after = self.map_pixel_to_coords(focus_point)
        self.view_offset = (
            self.view_offset[0] + (before[0] - after[0]) * zoom,
            self.view_offset[1] + (before[1] - after[1]) * zoom,
        )
        self.update_content_view()

    def pan(self, delta: Vec2) -> None:
        """Drag the content by ``delta`` pixels."""
        zoom = self._effective_zoom
        self.view_offset = (
            self.view_offset[0] - delta[0] / zoom,
            self.view_offset[1] - delta[1] / zoom,
        )
        self.content_center = (
            self.initial_size[0] / 2.0 + self.view_offset[0],
            self.initial_size[1] / 2.0 + self.view_offset[1],
        )

    def fit_content(self, bounds: Rect, padding: float = 50.0) -> None:
        """Zoom and centre so that ``bounds`` plus ``padding`` fills the view.

        Empty bounds leave the view unchanged.
        """
        if bounds.width <= 0 or bounds.height <= 0:
            return
        padded = Rect(
            bounds.left - padding,
            bounds.top - padding,
            bounds.width + 2 * padding,
            bounds.height + 2 * padding,
        )
        scale = min(self.view_size[0] / padded.width, self.view_size[1] / padded.height)
        self.zoom = min(max(scale, self.min_zoom), self.max_zoom)
        cx, cy = padded.center
        self.view_offset = (cx - self.initial_size[0] / 2.0, cy - self.initial_size[1] / 2.0)
        self.update_content_view()

    def resize(self, view_size: Vec2) -> None:
        """Change the window area's pixel size and refresh both views."""
        self.view_size = (float(view_size[0]), float(view_size[1]))
        self.update_views()

    def update_ui_view(self) -> None:
        self.ui_size = self.view_size
        self.ui_center = (self.view_size[0] / 2.0, self.view_size[1] / 2.0)

    def update_content_view(self) -> None:
        zoom = self.effective_zoom()
        self.content_size = (self.view_size[0] / zoom, self.view_size[1] / zoom)
        self.content_center = (
            self.view_size[0] / 2.0 + self.view_offset[0],
            self.view_size[1] / 2.0 + self.view_offset[1],
        )

    def update_views(self) -> None:
        self.update_ui_view()
        self.update_content_view()


class CanvasView(View):
    """A free-form drawing area view."""

    def pan(self, delta: Vec2) -> None:
        """Drag the canvas by ``delta`` pixels."""
        super().pan(delta)