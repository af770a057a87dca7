"""The main window's pages and switching between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from examseating.app import APPLICATION_VERSION, LONG_DISPLAY_NAME

WELCOME_NAME = "Ana Sayfa"
WELCOME_DESCRIPTION = "Ana sayfadasınız"
ABOUT_NAME = "Yardım ve İletişim"
SERIAL_LABEL = "Lisans Anahtarı: "
REMAINING_LABEL = "Kalan Deneme Hakları: "


class Page(ABC):
    """A page of the main window with a name and a changing description."""

    name: str = ""

    @abstractmethod
    def description(self) -> str:
        """The text shown under the page name."""


class WelcomePage(Page):
    """The home page."""

    name = WELCOME_NAME

    def description(self) -> str:
        return WELCOME_DESCRIPTION


@dataclass
class AboutPage(Page):
    """The help and contact page, showing the licence state."""

    status_text: str
    activated: bool = False
    serial: str = ""
    demo_remaining: int = 0
    version: str = APPLICATION_VERSION

    name = ABOUT_NAME

    @property
    def display_name(self) -> str:
        """The application's long name."""
        return LONG_DISPLAY_NAME

    @property
    def version_text(self) -> str:
        """The version as shown on the page."""
        return f"v{self.version}"

    def description(self) -> str:
        return f"Lisans durumu: {self.status_text}"

    def serial_row(self) -> tuple[str, str]:
        """Label and value: the licence key when activated, else the remaining trials."""
        if self.activated:
            return SERIAL_LABEL, self.serial
        return REMAINING_LABEL, str(self.demo_remaining)


class Subpage(IntEnum):
    """The pages of the main window, in the order of their buttons."""

    HOME = 0
    DATABASE = 1
    SCHEMES = 2
    ABOUT = 3


class PageNavigator:
    """Keeps track of the shown page, its name and its description."""

    def __init__(self, pages: Sequence[Page]) -> None:
        if not pages:
            raise ValueError("there must be at least one page")
        self.pages = list(pages)
        self.current = Subpage.HOME.value
        self.page_name = ""
        self.description = ""
        self.change_page(Subpage.HOME)

    def change_page(self, index: int) -> Page:
        """Show the page at an index and return it."""
        if not 0 <= index < len(self.pages):
            raise IndexError(f"page index must be between 0 and {len(self.pages) - 1}, got {index}")
        page = self.pages[index]
        self.current = int(index)
        self.page_name = page.name
        self.description = page.description()
        return page

    def update_description(self, index: int, description: str) -> bool:
        """Show a page's new description if that page is current; return whether it was shown."""
        if index != self.current:
            return False
        self.description = description
        return True


def demo_status_message(status_text: str, is_demo: bool, remaining: int) -> str:
    """The status bar text; in demo mode it tells how many trials are left."""
    if is_demo:
        return f"{status_text}. {remaining} adet ücretsiz deneme hakkınız kaldı."
    return status_text