"""Battle route: POST /battle-recommendation

Reads the owned pokemons, asks Gemini to analyse the wild pokemon and
pick the best counter, and returns Gemini's Markdown answer verbatim
as text/plain.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, Response, request
from pydantic import ValidationError as PydanticValidationError

from pokebattle.exceptions import ClientInputError, ReasoningError, StoreError
from pokebattle.schemas import BattleRecommendationRequest
from pokebattle.services import get_collection_service, get_llm_service

logger = logging.getLogger(__name__)

battle_bp = Blueprint("battle", __name__)

WILD_POKEMON_REQUIRED = "A wild pokemon name is required."
NO_POKEMONS = "You have no pokemons. Please add a pokemon first."
RECOMMENDATION_FAILED = "Failed to get a battle recommendation."


@battle_bp.route("/battle-recommendation", methods=["POST"])
def battle_recommendation() -> Response:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    try:
        body = BattleRecommendationRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ClientInputError(WILD_POKEMON_REQUIRED) from e

    # 1. Owned pokemons
    try:
        my_pokemons = get_collection_service().list_pokemons()
    except Exception as e:
        raise StoreError(RECOMMENDATION_FAILED) from e

    if not my_pokemons:
        raise ClientInputError(NO_POKEMONS)

    # 2. Gemini analysis
    try:
        text = get_llm_service().recommend_battle(my_pokemons, body.wild_pokemon)
    except Exception as e:
        raise ReasoningError(
            RECOMMENDATION_FAILED, details={"wild_pokemon": body.wild_pokemon}
        ) from e

    logger.info("Recommended a counter for %s from %d owned pokemons", body.wild_pokemon, len(my_pokemons))
    return Response(text, status=200, mimetype="text/plain")
