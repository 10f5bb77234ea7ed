from dockstate.translations import (
    TabContextMenuTranslations,
    Translations,
    WindowTranslations,
)


def test_english_context_menu():
    menu = TabContextMenuTranslations.english()
    assert menu.close_button == "Close"
    assert menu.eject_button == "Eject"


def test_english_window():
    assert (
        WindowTranslations.english().close_button_tooltip
        == "This window contains non-closable tabs."
    )


def test_translations_english_combines_parts():
    translations = Translations.english()
    assert translations.tab_context_menu == TabContextMenuTranslations.english()
    assert translations.window == WindowTranslations.english()
    assert Translations() == translations


def test_english_instances_are_independent():
    first = Translations.english()
    first.tab_context_menu.eject_button = "Undock"
    second = Translations.english()
    assert second.tab_context_menu.eject_button == "Eject"
    assert first != second


def test_custom_translations():
    custom = Translations(
        tab_context_menu=TabContextMenuTranslations(close_button="Zamknij", eject_button="Wysun"),
        window=WindowTranslations(close_button_tooltip="Nie"),
    )
    assert custom.tab_context_menu.close_button == "Zamknij"
    assert custom.window.close_button_tooltip == "Nie"