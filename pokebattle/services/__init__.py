"""Service layer package wrapping the external collaborators.

Contains the Realtime Database collection service and the Gemini
LLM service. Both are built once by ``create_app()`` and stored on the
app; routes fetch them with the accessors below.
"""

from __future__ import annotations

from flask import current_app

COLLECTION_KEY = "pokebattle.collection"
LLM_KEY = "pokebattle.llm"


def get_collection_service():
    return current_app.extensions[COLLECTION_KEY]


def get_llm_service():
    return current_app.extensions[LLM_KEY]
