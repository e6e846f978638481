"""State of one image viewer window: title, zoom, scrolling and toolbar actions."""

from __future__ import annotations

from typing import Callable, Optional

from micaview.zoom import ZoomState

WHEEL_SCROLL_STEP = 32.0


def has_gif_extension(path: str) -> bool:
    """True if ``path`` ends in ``.gif``, ignoring case."""
    if len(path) < 4:
        return False
    return path[-4:].lower() == ".gif"


def window_title(path: str, viewer_id: int) -> str:
    """Title ``filename.ext##id``: the file name plus a hidden unique suffix."""
    cut = max(path.rfind("\\"), path.rfind("/"))
    filename = path[cut + 1:] if cut >= 0 else path
    return f"{filename}##{viewer_id}"


class ImageViewer:
    """A viewer for one image file of known pixel size."""

    def __init__(
        self,
        viewer_id: int,
        filepath: str,
        width: int,
        height: int,
        open_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self.viewer_id = viewer_id
        self.filepath = filepath
        self.is_gif = has_gif_extension(filepath)
        self.title = window_title(filepath, viewer_id)
        self.zoom_state = ZoomState(width, height)
        self.open_callback = open_callback
        self.is_open = True
        self.scroll_x = 0.0
        self.scroll_y = 0.0

    @property
    def zoom(self) -> float:
        return self.zoom_state.zoom

    @property
    def has_new_image_button(self) -> bool:
        """The "new image" button is shown only when a callback was given."""
        return self.open_callback is not None

    def _scroll(self, dx: float, dy: float) -> None:
        self.scroll_x = max(0.0, self.scroll_x + dx)
        self.scroll_y = max(0.0, self.scroll_y + dy)

    def wheel(self, delta: float, ctrl: bool = False, shift: bool = False) -> bool:
        """Handle a wheel movement; return True if it was consumed.

        Ctrl zooms, Shift scrolls horizontally, otherwise it scrolls vertically.
        """
        if delta == 0.0:
            return False
        if ctrl:
            self.zoom_state.wheel_zoom(delta)
        elif shift:
            self._scroll(-delta * WHEEL_SCROLL_STEP, 0.0)
        else:
            self._scroll(0.0, -delta * WHEEL_SCROLL_STEP)
        return True

    def drag(self, dx: float, dy: float) -> None:
        """Pan by a mouse movement: dragging right reveals more to the right."""
        self._scroll(-dx, -dy)

    def info_text(self) -> str:
        """Toolbar text with image size and zoom percentage."""
        return (
            f"{self.zoom_state.width}x{self.zoom_state.height}"
            f"  ({self.zoom * 100.0:.0f}%)"
        )

    def request_new_image(self) -> bool:
        """Invoke the "new image" callback; return False when there is none."""
        if self.open_callback is None:
            return False
        self.open_callback()
        return True

    def close(self) -> None:
        """Mark the window as closed."""
        self.is_open = False