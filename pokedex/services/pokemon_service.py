import logging

from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.clients.translation_client import TranslationClient
from pokedex.models import (
    PipelineResult,
    PipelineStatus,
    PokemonResponse,
    UpstreamStatus,
)
from pokedex.utils import NoMatchingLocaleError, choose_translation_style, select_description


class PokemonService:
    """
    Runs the lookup pipeline: Pokemon -> species -> English description ->
    translation style -> (translation or original description).

    PokeAPI failures end the pipeline (NOT_FOUND or UPSTREAM_FAILURE).
    Translation failures never do: the original description is returned instead.
    The service holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        poke_client: PokeAPIClient,
        translation_client: TranslationClient,
        target_locale: str = "en",
        logger: logging.Logger | None = None,
    ):
        self._poke_client = poke_client
        self._translation_client = translation_client
        self._target_locale = target_locale
        self._logger = logger or logging.getLogger(__name__)

    async def _resolve(self, name: str) -> PipelineResult:
        pokemon_lookup = await self._poke_client.fetch_pokemon(name)

        if pokemon_lookup.status is UpstreamStatus.NOT_FOUND:
            self._logger.warning(f"[get_pokemon] {name} not found")
            return PipelineResult(status=PipelineStatus.NOT_FOUND)

        if pokemon_lookup.status is not UpstreamStatus.OK:
            self._logger.error(f"[get_pokemon] Unable to retrieve Pokemon {name}")
            return PipelineResult(status=PipelineStatus.UPSTREAM_FAILURE)

        pokemon = pokemon_lookup.pokemon
        species_lookup = await self._poke_client.fetch_species(pokemon.species_ref)

        # The Pokemon exists, so a missing species is an upstream fault rather than a 404
        if species_lookup.status is not UpstreamStatus.OK:
            self._logger.error(
                f"[get_pokemon] Unable to retrieve species for {name} "
                f"({species_lookup.status.value}) from {pokemon.species_ref}"
            )
            return PipelineResult(status=PipelineStatus.UPSTREAM_FAILURE)

        species = species_lookup.species
        try:
            description = select_description(species.descriptions, self._target_locale)
        except NoMatchingLocaleError as e:
            self._logger.error(f"[get_pokemon] {e} for Pokemon {name}")
            return PipelineResult(status=PipelineStatus.UPSTREAM_FAILURE)

        style = choose_translation_style(species.habitat, species.is_legendary)
        return PipelineResult(
            status=PipelineStatus.OK,
            pokemon=PokemonResponse(
                name=pokemon.name,
                description=description,
                habitat=species.habitat,
                is_legendary=species.is_legendary,
            ),
            style=style,
        )

    async def get_basic_info(self, name: str) -> PipelineResult:
        """
        Endpoint 1: Fetches the Pokemon with its untranslated English description.
        """
        return await self._resolve(name)

    async def get_translated_info(self, name: str) -> PipelineResult:
        """
        Endpoint 2: Fetches the Pokemon and applies the translation rule.
        Rule: Legendary OR Habitat is 'cave' -> Yoda. Otherwise -> Shakespeare.
        """
        result = await self._resolve(name)
        if result.status is not PipelineStatus.OK:
            return result

        translation = await self._translation_client.translate(result.pokemon.description, result.style)

        if not translation.ok:
            # Translation is best effort (e.g. the API is rate limited): keep the standard description
            self._logger.error(
                f"[get_translated_info] Unable to translate description of {name} ({result.style.value}). "
                "Returning standard description"
            )
            return result

        translated = result.pokemon.model_copy(update={"description": translation.translated})
        return result.model_copy(update={"pokemon": translated})
