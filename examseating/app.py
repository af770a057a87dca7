"""Application identity, the light colour palette and restarting the program."""

from __future__ import annotations

import colorsys
import subprocess
import sys
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

ORGANIZATION_NAME = "ikoSoft"
APPLICATION_NAME = "ikoOSKAR"
APPLICATION_VERSION = "4.2.0"
LONG_DISPLAY_NAME = "ikoOSKAR - iko Ortak Sınav Karma Sistemi"

_MAX16 = 0xFFFF


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {value}")

    def _hsv16(self) -> tuple[float, int, int]:
        h, s, v = colorsys.rgb_to_hsv(self.r / 255, self.g / 255, self.b / 255)
        return h, round(s * _MAX16), round(v * _MAX16)

    def _from_hsv16(self, h: float, s: int, v: int) -> "Color":
        r, g, b = colorsys.hsv_to_rgb(h, s / _MAX16, v / _MAX16)
        return Color(round(r * 255), round(g * 255), round(b * 255), self.a)

    def lighter(self, factor: int = 150) -> "Color":
        """Return a brighter colour; a factor of 150 is 50% brighter."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.darker(10000 // factor)
        h, s, v = self._hsv16()
        v = factor * v // 100
        if v > _MAX16:
            s = max(s - (v - _MAX16), 0)
            v = _MAX16
        return self._from_hsv16(h, s, v)

    def darker(self, factor: int = 200) -> "Color":
        """Return a darker colour; a factor of 200 is half as bright."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.lighter(10000 // factor)
        h, s, v = self._hsv16()
        v = v * 100 // factor
        return self._from_hsv16(h, s, v)

    def with_alpha(self, alpha: int) -> "Color":
        """Return the same colour with another alpha value."""
        return replace(self, a=alpha)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class ColorGroup(Enum):
    """The widget state a palette colour applies to."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DISABLED = "disabled"


class ColorRole(Enum):
    """What a palette colour is used for."""

    WINDOW_TEXT = "window_text"
    WINDOW = "window"
    BUTTON = "button"
    BUTTON_TEXT = "button_text"
    LIGHT = "light"
    MIDLIGHT = "midlight"
    DARK = "dark"
    MID = "mid"
    SHADOW = "shadow"
    TEXT = "text"
    BRIGHT_TEXT = "bright_text"
    BASE = "base"
    HIGHLIGHT = "highlight"
    HIGHLIGHTED_TEXT = "highlighted_text"
    PLACEHOLDER_TEXT = "placeholder_text"
    ACCENT = "accent"


@dataclass
class Palette:
    """Colours per widget state and role."""

    colors: dict[tuple[ColorGroup, ColorRole], Color] = field(default_factory=dict)

    def color(self, group: ColorGroup, role: ColorRole) -> Color:
        """Return the colour of a role in a group; KeyError if it was never set."""
        try:
            return self.colors[(group, role)]
        except KeyError:
            raise KeyError(f"no colour set for {group.name} {role.name}") from None

    def set_color(self, role: ColorRole, color: Color, group: Optional[ColorGroup] = None) -> None:
        """Set a role's colour in one group, or in every group when group is None."""
        groups = list(ColorGroup) if group is None else [group]
        for g in groups:
            self.colors[(g, role)] = color


def _base_palette(window_text: Color, window: Color, light: Color, dark: Color,
                  mid: Color, text: Color, base: Color) -> Palette:
    palette = Palette()
    defaults = {
        ColorRole.WINDOW_TEXT: window_text,
        ColorRole.BUTTON_TEXT: window_text,
        ColorRole.WINDOW: window,
        ColorRole.BUTTON: window,
        ColorRole.LIGHT: light,
        ColorRole.MIDLIGHT: window.lighter(115),
        ColorRole.DARK: dark,
        ColorRole.MID: mid,
        ColorRole.SHADOW: BLACK,
        ColorRole.TEXT: text,
        ColorRole.BRIGHT_TEXT: light,
        ColorRole.BASE: base,
        ColorRole.HIGHLIGHT: Color(0, 0, 128),
        ColorRole.HIGHLIGHTED_TEXT: WHITE,
    }
    for role, color in defaults.items():
        palette.set_color(role, color)
    return palette


def fusion_light() -> Palette:
    """Build the light palette the application uses."""
    window_text = BLACK
    background = Color(239, 239, 239)
    light = background.lighter(150)
    mid = background.darker(130)
    mid_light = mid.lighter(110)
    base = WHITE
    disabled_base = background
    dark = background.darker(150)
    dark_disabled = Color(209, 209, 209).darker(110)
    text = BLACK
    highlight = Color(48, 140, 198)
    highlighted_text = WHITE
    disabled_text = Color(190, 190, 190)
    button = background
    shadow = dark.darker(135)
    disabled_shadow = shadow.lighter(150)
    disabled_highlight = Color(145, 145, 145)
    placeholder = text.with_alpha(128)

    palette = _base_palette(window_text, background, light, dark, mid, text, base)
    palette.set_color(ColorRole.MIDLIGHT, mid_light)
    palette.set_color(ColorRole.BUTTON, button)
    palette.set_color(ColorRole.SHADOW, shadow)
    palette.set_color(ColorRole.HIGHLIGHTED_TEXT, highlighted_text)
    disabled = ColorGroup.DISABLED
    palette.set_color(ColorRole.TEXT, disabled_text, disabled)
    palette.set_color(ColorRole.WINDOW_TEXT, disabled_text, disabled)
    palette.set_color(ColorRole.BUTTON_TEXT, disabled_text, disabled)
    palette.set_color(ColorRole.BASE, disabled_base, disabled)
    palette.set_color(ColorRole.DARK, dark_disabled, disabled)
    palette.set_color(ColorRole.SHADOW, disabled_shadow, disabled)
    palette.set_color(ColorRole.HIGHLIGHT, highlight, ColorGroup.ACTIVE)
    palette.set_color(ColorRole.HIGHLIGHT, highlight, ColorGroup.INACTIVE)
    palette.set_color(ColorRole.HIGHLIGHT, disabled_highlight, disabled)
    palette.set_color(ColorRole.ACCENT, highlight, ColorGroup.ACTIVE)
    palette.set_color(ColorRole.ACCENT, highlight, ColorGroup.INACTIVE)
    palette.set_color(ColorRole.ACCENT, disabled_highlight, disabled)
    palette.set_color(ColorRole.PLACEHOLDER_TEXT, placeholder)
    return palette


def splash_text(version: str = APPLICATION_VERSION) -> str:
    """Text shown on the splash screen while the licence is checked."""
    return f"{LONG_DISPLAY_NAME} v{version}"


def restart_detached(executable: str = sys.executable,
                     args: Optional[Sequence[str]] = None) -> subprocess.Popen:
    """Start a new, detached instance of a program and return its process."""
    command = [executable, *(args or ())]
    options: dict = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
    }
    if sys.platform == "win32":
        options["creationflags"] = (
            subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        )
    else:
        options["start_new_session"] = True
    return subprocess.Popen(command, **options)