"""
Unit tests for LLMService prompt building and answer handling
"""
import pytest
from langchain_core.language_models import FakeListChatModel

from pokebattle.exceptions import ReasoningError
from pokebattle.services.llm_service import LLMService


def make_service(*responses):
    return LLMService(llm=FakeListChatModel(responses=list(responses)))


def test_prompt_embeds_collection_and_wild_pokemon():
    svc = make_service('unused')
    text = svc.build_prompt(['Pikachu', 'Charmander'], 'Geodude').to_string()

    assert 'Pikachu, Charmander' in text
    assert '"Geodude"' in text
    assert '### Wild pokemon analysis (Geodude)' in text
    assert '### Battle recommendation' in text
    assert 'Strong against' in text and 'Weak against' in text


def test_prompt_has_system_and_human_messages():
    svc = make_service('unused')
    messages = svc.build_prompt(['Pikachu'], 'Zubat').to_messages()
    assert [m.type for m in messages] == ['system', 'human']


def test_prompt_keeps_braces_in_names():
    svc = make_service('unused')
    text = svc.build_prompt(['{Mew}'], 'Ditto {x}').to_string()
    assert '{Mew}' in text
    assert 'Ditto {x}' in text


def test_recommend_returns_model_text_verbatim():
    svc = make_service('### analysis...')
    assert svc.recommend_battle(['Pikachu', 'Charmander'], 'Geodude') == '### analysis...'


def test_recommend_rejects_empty_answer():
    svc = make_service('   ')
    with pytest.raises(ReasoningError) as exc_info:
        svc.recommend_battle(['Pikachu'], 'Geodude')
    assert exc_info.value.details['wild_pokemon'] == 'Geodude'
