from enum import Enum

from pydantic import AliasPath, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# --- Upstream records (PokeAPI) ---
# Extra fields returned by PokeAPI are ignored (pydantic default).

class Pokemon(BaseModel):
    """The /pokemon/{name} record, reduced to what the pipeline needs."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    species_ref: str = Field(validation_alias=AliasPath("species", "url"))


class FlavorTextEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(validation_alias="flavor_text")
    locale: str = Field(validation_alias=AliasPath("language", "name"))


class PokemonSpecies(BaseModel):
    """The species record linked from a Pokemon."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # PokeAPI returns "habitat": null for some species
    habitat: str | None = Field(default=None, validation_alias=AliasPath("habitat", "name"))
    is_legendary: bool
    descriptions: list[FlavorTextEntry] = Field(validation_alias="flavor_text_entries")


# --- Tagged results returned at every upstream boundary ---

class UpstreamStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


class PokemonLookup(BaseModel):
    status: UpstreamStatus
    pokemon: Pokemon | None = None


class SpeciesLookup(BaseModel):
    status: UpstreamStatus
    species: PokemonSpecies | None = None


# --- FunTranslations ---

class TranslationStyle(str, Enum):
    # Values double as the FunTranslations route segment
    YODA = "yoda"
    SHAKESPEARE = "shakespeare"


class TranslationSuccess(BaseModel):
    total: int


class TranslationContents(BaseModel):
    translated: str | None = None
    text: str | None = None
    translation: str | None = None


class TranslationError(BaseModel):
    code: int | None = None
    message: str | None = None

    @property
    def populated(self) -> bool:
        return self.code is not None or bool(self.message)


class TranslationResponse(BaseModel):
    """Envelope returned by the FunTranslations API, for success and error bodies alike."""
    success: TranslationSuccess | None = None
    contents: TranslationContents | None = None
    error: TranslationError | None = None


class TranslationResult(BaseModel):
    translated: str | None = None
    error_code: int | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.translated is not None


# --- Public contract ---

class PokemonResponse(BaseModel):
    # Serialized as {name, description, habitat, isLegendary}
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    description: str
    habitat: str | None
    is_legendary: bool


class PipelineStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    UPSTREAM_FAILURE = "upstream_failure"


class PipelineResult(BaseModel):
    """Outcome of one lookup. Only ``pokemon`` is ever sent to the caller."""
    model_config = ConfigDict(frozen=True)

    status: PipelineStatus
    pokemon: PokemonResponse | None = None
    style: TranslationStyle | None = None
