"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, build the Realtime Database and Gemini services once, and
register route blueprints and the error handler.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, Response
from flask_cors import CORS

from pokebattle.config import Config
from pokebattle.exceptions import ClientInputError, PokeBattleException
from pokebattle.routes.battle import battle_bp
from pokebattle.routes.pokemons import pokemons_bp
from pokebattle.routes.root import root_bp
from pokebattle.services import COLLECTION_KEY, LLM_KEY
from pokebattle.services.collection_service import CollectionService
from pokebattle.services.llm_service import LLMService

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config = Config) -> None:
    logging.basicConfig(
        level=getattr(logging, str(cfg.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def handle_pokebattle_error(error: PokeBattleException) -> Response:
    if isinstance(error, ClientInputError):
        logger.info("Rejected request: %s", error.message)
    else:
        # Cause goes to the logs only; the caller gets the fixed message
        logger.error(
            "%s: %s %s", error.error_code, error.message, error.details,
            exc_info=error.__cause__ or error,
        )
    return Response(error.message, status=error.status_code, mimetype="text/plain")


def create_app(
    cfg: Config = Config,
    collection_service: Optional[CollectionService] = None,
    llm_service: Optional[LLMService] = None,
) -> Flask:
    configure_logging(cfg)
    app = Flask(__name__)
    # Basic config
    app.config.from_object(cfg)
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        send_wildcard=True,
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Collaborators are shared by every request
    if collection_service is None:
        collection_service = CollectionService.from_config(cfg)
    if llm_service is None:
        llm_service = LLMService(cfg)
        logger.info("Using Gemini model %s", llm_service.model_name)
    app.extensions[COLLECTION_KEY] = collection_service
    app.extensions[LLM_KEY] = llm_service

    # Blueprints
    app.register_blueprint(root_bp)
    app.register_blueprint(pokemons_bp)
    app.register_blueprint(battle_bp)

    app.register_error_handler(PokeBattleException, handle_pokebattle_error)

    return app
