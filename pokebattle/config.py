"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the listening port, Firebase and
Gemini settings. This keeps the rest of the codebase decoupled from
direct env access.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Union

from dotenv import load_dotenv

# Load .env before the class body reads the environment
load_dotenv()


class Config:
    # Base
    POKEBATTLE_ENV = os.getenv("POKEBATTLE_ENV", "dev")
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv(
        "LOG_LEVEL", "DEBUG" if POKEBATTLE_ENV in ("dev", "development") else "INFO"
    )

    # Firebase Realtime Database
    FIREBASE_DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL")
    # Deployments pass the service account JSON inline; local runs use the key file
    FIREBASE_SERVICE_ACCOUNT = os.getenv("FIREBASE_SERVICE_ACCOUNT")
    FIREBASE_SERVICE_ACCOUNT_FILE = os.getenv(
        "FIREBASE_SERVICE_ACCOUNT_FILE",
        os.path.abspath(os.path.join(os.getcwd(), "firebase-service-account-key.json")),
    )
    COLLECTION_PATH = os.getenv("COLLECTION_PATH", "my-pokemons")

    # Gemini chat model via langchain-google-genai
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    LLM_MODEL = os.getenv("LLM_MODEL", "gemini-2.5-flash")
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))


def load_service_account(cfg: Config = Config) -> Union[Dict[str, Any], str]:
    """Return the Firebase service account as a dict or a key file path.

    The inline JSON credential wins over the key file.
    """
    if cfg.FIREBASE_SERVICE_ACCOUNT:
        return json.loads(cfg.FIREBASE_SERVICE_ACCOUNT)
    return cfg.FIREBASE_SERVICE_ACCOUNT_FILE
