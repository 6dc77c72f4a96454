import pytest
from pokedex.models import FlavorTextEntry, TranslationStyle
from pokedex.utils import NoMatchingLocaleError, choose_translation_style, select_description


def entry(text, locale):
    return FlavorTextEntry(text=text, locale=locale)


# --- DESCRIPTION SELECTION ---

def test_first_matching_locale_wins_and_line_breaks_become_spaces():
    """Earlier entries in other languages are skipped; each break char becomes one space."""
    entries = [entry("a\nb", "ja"), entry("c\r\nd", "en-US")]

    assert select_description(entries, "en") == "c  d"


def test_upstream_order_is_preserved():
    entries = [
        entry("Ceci est français.", "fr"),
        entry("First English entry.", "en"),
        entry("Second English entry.", "en"),
    ]

    assert select_description(entries, "en") == "First English entry."


def test_form_feed_is_replaced_without_further_normalization():
    entries = [entry("  Lives in\fcaves.\n", "en")]

    # Leading/trailing whitespace is kept as received
    assert select_description(entries, "en") == "  Lives in caves. "


def test_locale_match_is_substring_based():
    entries = [entry("Sprache", "de"), entry("Hello there.", "xen")]

    assert select_description(entries, "en") == "Hello there."


def test_no_matching_locale_raises():
    entries = [entry("Ceci est français.", "fr"), entry("Esto es español.", "es")]

    with pytest.raises(NoMatchingLocaleError) as excinfo:
        select_description(entries, "en")

    assert excinfo.value.locale == "en"


def test_empty_entries_raise():
    with pytest.raises(NoMatchingLocaleError):
        select_description([], "en")


# --- TRANSLATION RULE ---

@pytest.mark.parametrize(
    "habitat, is_legendary",
    [
        ("cave", False),
        ("CAVE", False),
        ("Cave", True),
        ("mountain", True),
        (None, True),
    ],
)
def test_yoda_for_cave_or_legendary(habitat, is_legendary):
    assert choose_translation_style(habitat, is_legendary) is TranslationStyle.YODA


@pytest.mark.parametrize(
    "habitat",
    ["mountain", "urban", None, "caves", "dark cave", ""],
)
def test_shakespeare_otherwise(habitat):
    """Only an exact (case-insensitive) 'cave' counts; a missing habitat never does."""
    assert choose_translation_style(habitat, False) is TranslationStyle.SHAKESPEARE
