"""Collection routes: GET /my-pokemons and POST /my-pokemons

Lists the owned pokemons stored in the Realtime Database and appends new
ones. Failures talking to the database surface as a fixed 500 message;
the cause only goes to the logs.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from pokebattle.exceptions import ClientInputError, StoreError
from pokebattle.schemas import AddPokemonRequest
from pokebattle.services import get_collection_service


pokemons_bp = Blueprint("pokemons", __name__)

NAME_REQUIRED = "A pokemon name is required."
LIST_FAILED = "Failed to get my pokemon list."
ADD_FAILED = "Failed to add the new pokemon."


@pokemons_bp.get("/my-pokemons")
def list_pokemons():
    try:
        names = get_collection_service().list_pokemons()
    except Exception as e:
        raise StoreError(LIST_FAILED) from e
    return jsonify(names), 200


@pokemons_bp.post("/my-pokemons")
def add_pokemon() -> Response:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    try:
        body = AddPokemonRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ClientInputError(NAME_REQUIRED) from e

    try:
        get_collection_service().add_pokemon(body.name)
    except Exception as e:
        raise StoreError(ADD_FAILED, details={"name": body.name}) from e
    return Response(f"{body.name} was added successfully.", status=201, mimetype="text/plain")
