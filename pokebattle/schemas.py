"""Request schemas for API endpoints.

Holds Pydantic models to validate input payloads for /my-pokemons and
/battle-recommendation before any database or Gemini call is made.
This keeps contracts explicit and centralized.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AddPokemonRequest(BaseModel):
    """Body of POST /my-pokemons"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Name of the pokemon to add")


class BattleRecommendationRequest(BaseModel):
    """Body of POST /battle-recommendation"""
    model_config = ConfigDict(str_strip_whitespace=True)

    wild_pokemon: str = Field(
        ..., alias="wildPokemon", min_length=1, description="Name of the wild pokemon met"
    )
