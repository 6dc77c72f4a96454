"""Pokedex API: Pokemon descriptions from PokeAPI, optionally run through FunTranslations."""
