"""Client modules for external API communication."""
from .base import BaseHTTPClient
from .pokeapi_client import PokeAPIClient
from .translation_client import TranslationClient

__all__ = [
    'BaseHTTPClient',
    'PokeAPIClient',
    'TranslationClient',
]
