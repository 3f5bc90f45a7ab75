"""
Pytest configuration and fixtures for the battle helper tests
"""
import pytest

from pokebattle import create_app


class FakeCollectionService:
    """In-memory stand-in for the Realtime Database collection"""

    def __init__(self, names=None):
        self.names = list(names or [])
        self.fail_with = None
        self.list_calls = 0
        self.add_calls = 0

    def list_pokemons(self):
        self.list_calls += 1
        if self.fail_with:
            raise self.fail_with
        return list(self.names)

    def add_pokemon(self, name):
        self.add_calls += 1
        if self.fail_with:
            raise self.fail_with
        self.names.append(name)
        return f"-key{len(self.names):04d}"


class FakeLLMService:
    """Stand-in for Gemini that returns a fixed answer and records prompts"""

    model_name = "fake-gemini"

    def __init__(self, answer="### analysis..."):
        self.answer = answer
        self.fail_with = None
        self.calls = []

    def recommend_battle(self, my_pokemons, wild_pokemon):
        self.calls.append((list(my_pokemons), wild_pokemon))
        if self.fail_with:
            raise self.fail_with
        return self.answer


@pytest.fixture
def store():
    return FakeCollectionService()


@pytest.fixture
def llm():
    return FakeLLMService()


@pytest.fixture
def app(store, llm):
    """Flask application fixture wired to the fake collaborators"""
    flask_app = create_app(collection_service=store, llm_service=llm)
    flask_app.config['TESTING'] = True
    yield flask_app


@pytest.fixture
def client(app):
    """Test client fixture"""
    return app.test_client()
