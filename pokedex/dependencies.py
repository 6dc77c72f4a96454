from fastapi import Depends

from pokedex.clients import PokeAPIClient
from pokedex.clients import TranslationClient
from pokedex.config import Settings, get_settings
from pokedex.services import PokemonService

_poke_client = None
_translation_client = None

def get_poke_client(settings: Settings = Depends(get_settings)) -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient(
            base_url=settings.pokeapi_base_url,
            timeout=settings.request_timeout,
            retry_attempts=settings.retry_attempts,
            retry_delay=settings.retry_delay,
        )
    return _poke_client

def get_translation_client(settings: Settings = Depends(get_settings)) -> TranslationClient:
    global _translation_client
    if _translation_client is None:
        _translation_client = TranslationClient(
            base_url=settings.translation_base_url,
            timeout=settings.request_timeout,
            retry_attempts=settings.retry_attempts,
            retry_delay=settings.retry_delay,
        )
    return _translation_client

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    translation_client: TranslationClient = Depends(get_translation_client),
    settings: Settings = Depends(get_settings),
) -> PokemonService:
    return PokemonService(
        poke_client=poke_client,
        translation_client=translation_client,
        target_locale=settings.target_locale,
    )

async def close_clients():
    """Close the shared HTTP clients (call on app shutdown)."""
    global _poke_client, _translation_client
    for client in (_poke_client, _translation_client):
        if client is not None:
            await client.close()
    _poke_client = None
    _translation_client = None
