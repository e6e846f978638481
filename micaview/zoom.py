"""Zoom and centring arithmetic for an image shown in a scrollable view."""

from __future__ import annotations

from typing import Tuple

ZOOM_MIN = 0.05
ZOOM_MAX = 16.0
ZOOM_STEP = 0.1

MAX_INITIAL_WIDTH = 820
MAX_INITIAL_HEIGHT = 660
INITIAL_WIDTH_MARGIN = 16
INITIAL_HEIGHT_MARGIN = 80


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class ZoomState:
    """Zoom factor of an image of ``width`` x ``height`` pixels.

    The zoom always stays within ``[ZOOM_MIN, ZOOM_MAX]``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.zoom = 1.0

    def zoom_in(self) -> float:
        """Increase the zoom by one step, up to ``ZOOM_MAX``; return the new zoom."""
        self.zoom = min(self.zoom + ZOOM_STEP, ZOOM_MAX)
        return self.zoom

    def zoom_out(self) -> float:
        """Decrease the zoom by one step, down to ``ZOOM_MIN``; return the new zoom."""
        self.zoom = max(self.zoom - ZOOM_STEP, ZOOM_MIN)
        return self.zoom

    def reset(self) -> float:
        """Return to 1:1 (pixel perfect)."""
        self.zoom = 1.0
        return self.zoom

    def fit(self, available_width: float, available_height: float) -> float:
        """Choose the zoom that makes the whole image fit, keeping its aspect ratio.

        Nothing changes when the image or the area is empty.
        """
        if (
            self.width == 0
            or self.height == 0
            or available_width <= 0.0
            or available_height <= 0.0
        ):
            return self.zoom
        scale_x = available_width / self.width
        scale_y = available_height / self.height
        self.zoom = _clamp(min(scale_x, scale_y), ZOOM_MIN, ZOOM_MAX)
        return self.zoom

    def wheel_zoom(self, delta: float) -> float:
        """Zoom by ``delta`` wheel ticks (positive zooms in)."""
        self.zoom = _clamp(self.zoom + ZOOM_STEP * delta, ZOOM_MIN, ZOOM_MAX)
        return self.zoom

    def scaled_size(self) -> Tuple[float, float]:
        """On-screen size of the image at the current zoom."""
        return (float(self.width) * self.zoom, float(self.height) * self.zoom)

    def initial_size(self) -> Tuple[float, float]:
        """Initial window size: image plus chrome, capped at 820 x 660."""
        return (
            float(min(self.width + INITIAL_WIDTH_MARGIN, MAX_INITIAL_WIDTH)),
            float(min(self.height + INITIAL_HEIGHT_MARGIN, MAX_INITIAL_HEIGHT)),
        )

    def image_offset(
        self, region_width: float, region_height: float
    ) -> Tuple[float, float]:
        """Offset that centres the image along each axis where it is smaller than the region."""
        img_w, img_h = self.scaled_size()
        offset_x = (region_width - img_w) * 0.5 if img_w < region_width else 0.0
        offset_y = (region_height - img_h) * 0.5 if img_h < region_height else 0.0
        return (offset_x, offset_y)

    def pixel_at(
        self,
        mouse_x: float,
        mouse_y: float,
        origin_x: float,
        origin_y: float,
    ) -> Tuple[int, int]:
        """Image pixel under the mouse, given the image's top-left corner on screen."""
        img_w, img_h = self.scaled_size()
        if img_w == 0.0 or img_h == 0.0:
            raise ValueError("image has no area; no pixel lies under the mouse")
        uv_x = (mouse_x - origin_x) / img_w
        uv_y = (mouse_y - origin_y) / img_h
        return (int(uv_x * self.width), int(uv_y * self.height))