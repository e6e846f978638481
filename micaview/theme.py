"""Dark "Mica" colour theme: configuration, persistence and application to a style."""

from __future__ import annotations

import enum
import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple, Union

logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]
PathLike = Union[str, "os.PathLike[str]"]

_COLOR_KEYS = ("r", "g", "b", "a")


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def as_tuple(self) -> RGBA:
        """Return the colour as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)

    def _to_dict(self) -> Dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @staticmethod
    def _from_value(value: Any, name: str) -> "Color":
        if not isinstance(value, dict):
            raise TypeError(f"{name}: expected an object with r, g, b, a")
        unknown = set(value) - set(_COLOR_KEYS)
        if unknown:
            raise ValueError(f"{name}: unknown colour keys {sorted(unknown)}")
        return Color(**{key: _as_float(value[key], f"{name}.{key}") for key in value})


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name}: expected a number, got {type(value).__name__}")
    return float(value)


@dataclass
class ThemeConfig:
    """Every colour and dimension of the Mica theme."""

    # Surfaces
    surface_primary: Color = Color(0.129, 0.129, 0.129, 0.78)
    surface_secondary: Color = Color(0.157, 0.157, 0.157, 0.85)

    # Accent and UI
    accent: Color = Color(0.004, 0.576, 0.976, 1.0)
    text_primary: Color = Color(0.949, 0.949, 0.949, 1.0)
    text_secondary: Color = Color(0.698, 0.698, 0.702, 1.0)
    border: Color = Color(0.329, 0.329, 0.329, 0.4)
    hover: Color = Color(0.212, 0.212, 0.212, 0.9)
    active: Color = Color(0.004, 0.576, 0.976, 0.9)

    # Frames and input fields
    frame_bg: Color = Color(0.176, 0.176, 0.176, 0.545)
    frame_bg_hovered: Color = Color(0.212, 0.212, 0.212, 0.9)
    frame_bg_active: Color = Color(0.067, 0.341, 0.608, 0.588)

    # Style dimensions
    frame_rounding: float = 4.0
    window_rounding: float = 8.0
    popup_rounding: float = 4.0
    tab_rounding: float = 4.0
    grab_rounding: float = 2.0
    frame_border_size: float = 1.0
    window_border_size: float = 1.0
    popup_border_size: float = 1.0
    scrollbar_size: float = 14.0
    grab_min_size: float = 10.0

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary; colours become ``{r, g, b, a}`` objects."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[f.name] = value._to_dict() if isinstance(value, Color) else value
        return out

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ThemeConfig":
        """Build a config from a dictionary; missing fields keep their defaults.

        Unknown top-level keys are ignored. Raises ``TypeError`` or
        ``ValueError`` when a present field has the wrong shape.
        """
        if not isinstance(data, dict):
            raise TypeError("theme data must be an object")
        defaults = ThemeConfig()
        values: Dict[str, Any] = {}
        for f in fields(ThemeConfig):
            if f.name not in data:
                continue
            raw = data[f.name]
            if isinstance(getattr(defaults, f.name), Color):
                values[f.name] = Color._from_value(raw, f.name)
            else:
                values[f.name] = _as_float(raw, f.name)
        return ThemeConfig(**values)


class StyleColor(enum.Enum):
    """Colour slots of a widget style."""

    TEXT = enum.auto()
    TEXT_DISABLED = enum.auto()
    WINDOW_BG = enum.auto()
    CHILD_BG = enum.auto()
    POPUP_BG = enum.auto()
    BORDER = enum.auto()
    BORDER_SHADOW = enum.auto()
    FRAME_BG = enum.auto()
    FRAME_BG_HOVERED = enum.auto()
    FRAME_BG_ACTIVE = enum.auto()
    TITLE_BG = enum.auto()
    TITLE_BG_ACTIVE = enum.auto()
    TITLE_BG_COLLAPSED = enum.auto()
    MENU_BAR_BG = enum.auto()
    SCROLLBAR_BG = enum.auto()
    SCROLLBAR_GRAB = enum.auto()
    SCROLLBAR_GRAB_HOVERED = enum.auto()
    SCROLLBAR_GRAB_ACTIVE = enum.auto()
    CHECK_MARK = enum.auto()
    SLIDER_GRAB = enum.auto()
    SLIDER_GRAB_ACTIVE = enum.auto()
    BUTTON = enum.auto()
    BUTTON_HOVERED = enum.auto()
    BUTTON_ACTIVE = enum.auto()
    HEADER = enum.auto()
    HEADER_HOVERED = enum.auto()
    HEADER_ACTIVE = enum.auto()
    SEPARATOR = enum.auto()
    SEPARATOR_HOVERED = enum.auto()
    SEPARATOR_ACTIVE = enum.auto()
    RESIZE_GRIP = enum.auto()
    RESIZE_GRIP_HOVERED = enum.auto()
    RESIZE_GRIP_ACTIVE = enum.auto()
    TAB = enum.auto()
    TAB_HOVERED = enum.auto()
    TAB_SELECTED = enum.auto()
    TAB_DIMMED = enum.auto()
    PLOT_LINES = enum.auto()
    PLOT_LINES_HOVERED = enum.auto()
    PLOT_HISTOGRAM = enum.auto()
    PLOT_HISTOGRAM_HOVERED = enum.auto()
    TEXT_SELECTED_BG = enum.auto()
    DRAG_DROP_TARGET = enum.auto()
    NAV_CURSOR = enum.auto()
    NAV_WINDOWING_HIGHLIGHT = enum.auto()
    NAV_WINDOWING_DIM_BG = enum.auto()
    MODAL_WINDOW_DIM_BG = enum.auto()
    DOCKING_PREVIEW = enum.auto()
    DOCKING_EMPTY_BG = enum.auto()


@dataclass
class Style:
    """A widget style: colour table plus sizes, paddings and flags."""

    colors: Dict[StyleColor, RGBA] = field(default_factory=dict)
    alpha: float = 1.0
    window_padding: Tuple[float, float] = (8.0, 8.0)
    window_rounding: float = 0.0
    window_border_size: float = 1.0
    popup_rounding: float = 0.0
    popup_border_size: float = 1.0
    frame_padding: Tuple[float, float] = (4.0, 3.0)
    frame_rounding: float = 0.0
    frame_border_size: float = 0.0
    item_spacing: Tuple[float, float] = (8.0, 4.0)
    indent_spacing: float = 21.0
    scrollbar_size: float = 14.0
    grab_min_size: float = 12.0
    grab_rounding: float = 0.0
    log_slider_deadzone: float = 4.0
    tab_rounding: float = 5.0
    anti_aliased_lines: bool = True
    anti_aliased_lines_use_tex: bool = True
    anti_aliased_fill: bool = True


def default_theme() -> ThemeConfig:
    """Return the theme with all default values."""
    return ThemeConfig()


def load_theme(path: PathLike) -> ThemeConfig:
    """Read a theme from a JSON file; on any failure log it and return the defaults."""
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        return ThemeConfig.from_dict(data)
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("failed to load theme from %s: %s", os.fspath(path), exc)
    return default_theme()


def save_theme(config: ThemeConfig, path: PathLike) -> None:
    """Write a theme as JSON; a failure is logged, not raised."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(config.to_dict(), handle, indent=2)
    except OSError as exc:
        logger.warning("failed to save theme to %s: %s", os.fspath(path), exc)


def apply_mica_theme(theme: ThemeConfig, style: Style | None = None) -> Style:
    """Apply ``theme`` to ``style`` in place and return it.

    With no style given a fresh ``Style`` is created, themed and returned.
    """
    if style is None:
        style = Style()
    c = style.colors
    transparent: RGBA = (0.0, 0.0, 0.0, 0.0)

    # Window and background
    c[StyleColor.WINDOW_BG] = theme.surface_primary.as_tuple()
    c[StyleColor.CHILD_BG] = transparent
    c[StyleColor.POPUP_BG] = theme.surface_secondary.as_tuple()
    c[StyleColor.BORDER] = theme.border.as_tuple()
    c[StyleColor.BORDER_SHADOW] = transparent

    # Frames
    c[StyleColor.FRAME_BG] = theme.frame_bg.as_tuple()
    c[StyleColor.FRAME_BG_HOVERED] = theme.frame_bg_hovered.as_tuple()
    c[StyleColor.FRAME_BG_ACTIVE] = theme.frame_bg_active.as_tuple()

    # Title bar and menu bar
    c[StyleColor.TITLE_BG] = theme.surface_primary.as_tuple()
    c[StyleColor.TITLE_BG_ACTIVE] = theme.surface_secondary.as_tuple()
    c[StyleColor.TITLE_BG_COLLAPSED] = theme.surface_primary.as_tuple()
    c[StyleColor.MENU_BAR_BG] = theme.surface_secondary.as_tuple()

    # Scrollbar
    c[StyleColor.SCROLLBAR_BG] = (0.02, 0.02, 0.02, 0.53)
    c[StyleColor.SCROLLBAR_GRAB] = (0.31, 0.31, 0.31, 1.0)
    c[StyleColor.SCROLLBAR_GRAB_HOVERED] = (0.41, 0.41, 0.41, 1.0)
    c[StyleColor.SCROLLBAR_GRAB_ACTIVE] = (0.51, 0.51, 0.51, 1.0)

    # Buttons and headers
    c[StyleColor.BUTTON] = theme.frame_bg.as_tuple()
    c[StyleColor.BUTTON_HOVERED] = theme.hover.as_tuple()
    c[StyleColor.BUTTON_ACTIVE] = theme.frame_bg_active.as_tuple()
    c[StyleColor.HEADER] = theme.frame_bg.as_tuple()
    c[StyleColor.HEADER_HOVERED] = theme.hover.as_tuple()
    c[StyleColor.HEADER_ACTIVE] = theme.frame_bg_active.as_tuple()

    # Separator and resize grip
    c[StyleColor.SEPARATOR] = theme.border.as_tuple()
    c[StyleColor.SEPARATOR_HOVERED] = (0.45, 0.45, 0.45, 0.5)
    c[StyleColor.SEPARATOR_ACTIVE] = theme.accent.as_tuple()
    c[StyleColor.RESIZE_GRIP] = (0.289, 0.289, 0.289, 0.45)
    c[StyleColor.RESIZE_GRIP_HOVERED] = theme.hover.as_tuple()
    c[StyleColor.RESIZE_GRIP_ACTIVE] = theme.accent.as_tuple()

    # Tabs
    c[StyleColor.TAB] = (0.132, 0.132, 0.132, 0.863)
    c[StyleColor.TAB_HOVERED] = theme.hover.as_tuple()
    c[StyleColor.TAB_SELECTED] = theme.accent.as_tuple()
    c[StyleColor.TAB_DIMMED] = c[StyleColor.TAB]

    # Text
    c[StyleColor.TEXT] = theme.text_primary.as_tuple()
    c[StyleColor.TEXT_DISABLED] = theme.text_secondary.as_tuple()

    # Selection widgets and plots
    c[StyleColor.CHECK_MARK] = theme.accent.as_tuple()
    c[StyleColor.SLIDER_GRAB] = theme.accent.as_tuple()
    c[StyleColor.SLIDER_GRAB_ACTIVE] = theme.accent.as_tuple()
    c[StyleColor.PLOT_LINES] = (0.61, 0.61, 0.61, 1.0)
    c[StyleColor.PLOT_LINES_HOVERED] = (1.0, 0.43, 0.35, 1.0)
    c[StyleColor.PLOT_HISTOGRAM] = theme.accent.as_tuple()
    c[StyleColor.PLOT_HISTOGRAM_HOVERED] = theme.accent.as_tuple()

    # Navigation, selection and docking
    c[StyleColor.TEXT_SELECTED_BG] = (0.067, 0.341, 0.608, 0.35)
    c[StyleColor.DRAG_DROP_TARGET] = (0.004, 0.576, 0.976, 0.9)
    c[StyleColor.NAV_CURSOR] = theme.accent.as_tuple()
    c[StyleColor.NAV_WINDOWING_HIGHLIGHT] = (1.0, 1.0, 1.0, 0.7)
    c[StyleColor.NAV_WINDOWING_DIM_BG] = (0.8, 0.8, 0.8, 0.2)
    c[StyleColor.MODAL_WINDOW_DIM_BG] = (0.8, 0.8, 0.8, 0.35)
    c[StyleColor.DOCKING_PREVIEW] = (0.004, 0.576, 0.976, 0.3)
    c[StyleColor.DOCKING_EMPTY_BG] = (0.2, 0.2, 0.2, 1.0)

    # Dimensions
    style.frame_rounding = theme.frame_rounding
    style.grab_min_size = theme.grab_min_size
    style.grab_rounding = theme.grab_rounding
    style.window_rounding = theme.window_rounding
    style.popup_rounding = theme.popup_rounding
    style.tab_rounding = theme.tab_rounding
    style.frame_border_size = theme.frame_border_size
    style.window_border_size = theme.window_border_size
    style.popup_border_size = theme.popup_border_size
    style.scrollbar_size = theme.scrollbar_size
    style.alpha = 1.0
    style.anti_aliased_fill = True
    style.anti_aliased_lines = True
    style.anti_aliased_lines_use_tex = True
    style.window_padding = (10.0, 10.0)
    style.frame_padding = (8.0, 6.0)
    style.item_spacing = (8.0, 6.0)
    style.indent_spacing = 20.0
    style.log_slider_deadzone = 4.0
    return style