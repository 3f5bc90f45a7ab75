"""LLMService: builds the battle prompt and asks Gemini for a recommendation.

The completion is returned as plain Markdown text; its structure comes
from the format template in the prompt and is not parsed here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.prompt_values import PromptValue
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from pokebattle.config import Config
from pokebattle.exceptions import ReasoningError
from prompts.battle_template import BATTLE_HUMAN_TEMPLATE, BATTLE_SYSTEM_TEMPLATE

logger = logging.getLogger(__name__)

BATTLE_PROMPT = ChatPromptTemplate.from_messages(
    [
        ("system", BATTLE_SYSTEM_TEMPLATE),
        ("human", BATTLE_HUMAN_TEMPLATE),
    ]
)


def _content_text(message: Any) -> str:
    content = message.content if hasattr(message, "content") else message
    if isinstance(content, str):
        return content
    # Gemini may answer with a list of content blocks
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type", "text") == "text":
            parts.append(block.get("text") or "")
    return "".join(parts)


class LLMService:
    def __init__(self, cfg: Config = Config, llm: Optional[BaseChatModel] = None):
        self.cfg = cfg
        self.model_name = getattr(cfg, "LLM_MODEL", "gemini-2.5-flash")
        if llm is None:
            kwargs: Dict[str, Any] = {}
            api_key = getattr(cfg, "GEMINI_API_KEY", None)
            # Without an explicit key the client reads GOOGLE_API_KEY
            if api_key:
                kwargs["google_api_key"] = api_key
            llm = ChatGoogleGenerativeAI(
                model=self.model_name,
                temperature=getattr(cfg, "LLM_TEMPERATURE", 0.2),
                **kwargs,
            )
        self.llm = llm

    def build_prompt(self, my_pokemons: List[str], wild_pokemon: str) -> PromptValue:
        return BATTLE_PROMPT.invoke(
            {
                "my_pokemons": ", ".join(str(p) for p in my_pokemons),
                "wild_pokemon": wild_pokemon,
            }
        )

    def recommend_battle(self, my_pokemons: List[str], wild_pokemon: str) -> str:
        """Return Gemini's analysis of `wild_pokemon` and the best counter from `my_pokemons`."""
        prompt = self.build_prompt(my_pokemons, wild_pokemon)
        logger.debug(
            "Requesting battle recommendation from %s (wild=%s, owned=%d)",
            self.model_name,
            wild_pokemon,
            len(my_pokemons),
        )
        result = self.llm.invoke(prompt)
        text = _content_text(result)
        if not text.strip():
            raise ReasoningError(
                "Gemini returned an empty recommendation.",
                details={"model": self.model_name, "wild_pokemon": wild_pokemon},
            )
        return text
