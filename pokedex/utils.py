from collections.abc import Sequence

from pokedex.models import FlavorTextEntry, TranslationStyle

# Line feed, carriage return and form feed each become a single space
_LINE_BREAKS = str.maketrans({"\n": " ", "\r": " ", "\f": " "})


class NoMatchingLocaleError(LookupError):
    def __init__(self, locale: str):
        super().__init__(f"No description found for locale '{locale}'")
        self.locale = locale


def select_description(entries: Sequence[FlavorTextEntry], locale: str) -> str:
    """
    Returns the first description whose language tag contains ``locale``,
    with line breaks replaced by spaces. Upstream order is kept as received,
    so "en-US" matches "en" and the earliest matching entry wins.

    Raises NoMatchingLocaleError if no entry matches.
    """
    entry = next((entry for entry in entries if locale in entry.locale), None)
    if entry is None:
        raise NoMatchingLocaleError(locale)
    return entry.text.translate(_LINE_BREAKS)


def choose_translation_style(habitat: str | None, is_legendary: bool) -> TranslationStyle:
    """Rule: Legendary OR habitat is 'cave' (any case) -> Yoda. Otherwise -> Shakespeare."""
    is_cave_habitat = habitat is not None and habitat.lower() == "cave"

    if is_legendary or is_cave_habitat:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE
