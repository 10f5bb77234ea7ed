"""Text labels shown by the dock area's built-in elements."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TabContextMenuTranslations:
    """Labels of the buttons in a tab's context menu."""

    close_button: str = "Close"
    eject_button: str = "Eject"

    @staticmethod
    def english() -> TabContextMenuTranslations:
        """Default English labels."""
        return TabContextMenuTranslations()


@dataclass
class WindowTranslations:
    """Labels used by windowed surfaces."""

    close_button_tooltip: str = "This window contains non-closable tabs."

    @staticmethod
    def english() -> WindowTranslations:
        """Default English labels."""
        return WindowTranslations()


@dataclass
class Translations:
    """All text overrides grouped together."""

    tab_context_menu: TabContextMenuTranslations = field(
        default_factory=TabContextMenuTranslations.english
    )
    window: WindowTranslations = field(default_factory=WindowTranslations.english)

    @staticmethod
    def english() -> Translations:
        """Default English labels."""
        return Translations()