"""Small shared interface pieces: error reporting, links, spinner and buttons."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional

SPINNER_SIZE = (100, 100)
SPINNER_SPEED = 200
NAV_HEIGHT = 40
NAV_ICON_SIZE = (22, 22)

WAIT_TEXT = "Lütfen Bekleyiniz..."
WAIT_STYLE = "color: #777777"
DEMO_TEXT = "Ücretsiz Deneme Sürümünü Başlat"
ACTIVATE_TEXT = "Etkinleştir"
ACTIVATION_ERROR_TITLE = "Aktivasyon Hatası"
ACTIVATION_SUCCESS_TITLE = "Aktivasyon Başarılı"


def _print_error(title: str, message: str) -> None:
    print(f"{title}: {message}", file=sys.stderr)


class ErrorReporter:
    """Shows error messages under a fixed title."""

    def __init__(self, title: str, show: Optional[Callable[[str, str], object]] = None) -> None:
        self.title = title
        self.show = show or _print_error

    def display_message(self, message: str) -> None:
        """Show one error message with this reporter's title."""
        self.show(self.title, message)


def contact_link_html(text: str, href: str) -> str:
    """Rich text for a clickable contact link."""
    return f'<a href="{href}">{text}</a>'


@dataclass
class Spinner:
    """A titled busy indicator."""

    title: str = ""
    size: tuple[int, int] = SPINNER_SIZE
    speed: int = SPINNER_SPEED
    running: bool = False

    def start(self) -> None:
        """Start the animation."""
        self.running = True

    def stop(self) -> None:
        """Stop the animation."""
        self.running = False


@dataclass
class NavButton:
    """A navigation button's appearance."""

    object_name: str
    text: str
    icon: str
    icon_size: tuple[int, int] = NAV_ICON_SIZE
    minimum_height: int = NAV_HEIGHT
    right_to_left: bool = False


def _prev_button() -> NavButton:
    return NavButton("btnPrev", "  Geri  ", ":/arrow-left.png")


def _next_button() -> NavButton:
    return NavButton("btnNext", "  İleri  ", ":/arrow-right.png", right_to_left=True)


@dataclass
class TwoButtonNav:
    """A back and a forward button at the bottom of a wizard."""

    btn_prev: NavButton = field(default_factory=_prev_button)
    btn_next: NavButton = field(default_factory=_next_button)
    maximum_height: int = NAV_HEIGHT
    visible: bool = True


@dataclass
class ActivationButtons:
    """The demo and activation buttons, disabled while a request runs."""

    demo_text: str = DEMO_TEXT
    activate_text: str = ACTIVATE_TEXT
    style: str = ""
    enabled: bool = True

    def set_enabled(self, enabled: bool) -> None:
        """Enable both buttons, or disable them and show a waiting text."""
        self.enabled = enabled
        if enabled:
            self.demo_text = DEMO_TEXT
            self.activate_text = ACTIVATE_TEXT
            self.style = ""
        else:
            self.demo_text = WAIT_TEXT
            self.activate_text = WAIT_TEXT
            self.style = WAIT_STYLE