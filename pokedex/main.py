import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response, status

from pokedex.config import get_settings
from pokedex.dependencies import close_clients, get_pokemon_service
from pokedex.models import PipelineResult, PipelineStatus, PokemonResponse
from pokedex.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Process-wide logging is configured once here, outside the core components
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield
    await close_clients()


app = FastAPI(
    title="Pokedex API",
    description="Pokemon descriptions from PokeAPI, optionally translated by FunTranslations.",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    # Internal details are logged, never returned to the caller
    logger.exception(f"Unhandled error while serving {request.url.path}")
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def to_response(result: PipelineResult) -> PokemonResponse | Response:
    """Maps the pipeline outcome to the HTTP contract: 200 with body, or an empty 404/500."""
    if result.status is PipelineStatus.OK:
        return result.pokemon
    if result.status is PipelineStatus.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# Endpoint 1: Basic Pokemon Info
@app.get(
    "/pokemon/{name}",
    response_model=PokemonResponse,
    summary="Returns basic Pokemon information",
)
async def get_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Fetches basic information (name, description, habitat, legendary status) for a given Pokemon name."""
    return to_response(await service.get_basic_info(name))


# Endpoint 2: Translated Pokemon Info
@app.get(
    "/pokemon/translated/{name}",
    response_model=PokemonResponse,
    summary="Returns Pokemon information with fun translation based on legendary/habitat status",
)
@app.get("/pokemon/{name}/translated", response_model=PokemonResponse, include_in_schema=False)
async def get_translated_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """
    Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).
    If the translation API fails (e.g. rate limit), the standard description is returned.
    """
    return to_response(await service.get_translated_info(name))


@app.get("/health", summary="Liveness probe")
async def health():
    return {"status": "ok"}
