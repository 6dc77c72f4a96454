import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pokedex.clients.base import BaseHTTPClient
from pokedex.models import Pokemon, PokemonLookup, PokemonSpecies, SpeciesLookup, UpstreamStatus


class PokeAPIClient(BaseHTTPClient):
    BASE_URL = "https://pokeapi.co"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = 5.0,
        retry_attempts: int = 3,
        retry_delay: float = 0.6,
        logger: logging.Logger | None = None,
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            retry_attempts=retry_attempts,
            retry_delay=retry_delay,
            logger=logger or logging.getLogger(__name__),
        )

    async def _fetch(self, stage: str, url: str) -> tuple[UpstreamStatus, dict | None]:
        """Performs the GET and maps the outcome to an UpstreamStatus plus the decoded body."""
        try:
            response = await self.get(url)
        except httpx.RequestError as e:
            # Network failures/timeouts (after retries) and undecodable bodies
            self.logger.error(f"[{stage}] PokeAPI request error for {url}: {e}")
            return UpstreamStatus.FAILURE, None

        self.logger.info(f"[{stage}] PokeAPI responded {response.status_code} {response.reason_phrase} for {url}")

        if response.status_code == 404:
            self.logger.warning(f"[{stage}] {url} not found")
            return UpstreamStatus.NOT_FOUND, None

        if not response.is_success:
            self.logger.error(f"[{stage}] PokeAPI failed with status {response.status_code} for {url}")
            return UpstreamStatus.FAILURE, None

        try:
            return UpstreamStatus.OK, response.json()
        except ValueError as e:
            self.logger.error(f"[{stage}] PokeAPI returned a body that is not JSON for {url}: {e}")
            return UpstreamStatus.FAILURE, None

    async def fetch_pokemon(self, name: str) -> PokemonLookup:
        """Looks up a Pokemon by name. An unknown name yields NOT_FOUND."""
        status, data = await self._fetch("fetch_pokemon", f"/api/v2/pokemon/{quote(name, safe='')}")
        if status is not UpstreamStatus.OK:
            return PokemonLookup(status=status)

        try:
            pokemon = Pokemon.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"[fetch_pokemon] Unexpected PokeAPI response format for '{name}': {e}")
            return PokemonLookup(status=UpstreamStatus.FAILURE)

        return PokemonLookup(status=UpstreamStatus.OK, pokemon=pokemon)

    async def fetch_species(self, species_ref: str) -> SpeciesLookup:
        """Follows the species link of a Pokemon (an absolute PokeAPI URL)."""
        status, data = await self._fetch("fetch_species", species_ref)
        if status is not UpstreamStatus.OK:
            return SpeciesLookup(status=status)

        try:
            species = PokemonSpecies.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"[fetch_species] Unexpected PokeAPI response format for {species_ref}: {e}")
            return SpeciesLookup(status=UpstreamStatus.FAILURE)

        return SpeciesLookup(status=UpstreamStatus.OK, species=species)
