import pytest

from gemini_proxy.app import create_app
from gemini_proxy.config import ProxyConfig


class FakeGenerator:
    def __init__(self, text="Hi there!", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, model_id, prompt):
        self.calls.append((model_id, prompt))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def config():
    return ProxyConfig(api_key="test-key")


@pytest.fixture
def app(config, generator):
    return create_app(config, generator)


@pytest.fixture
def client(app):
    return app.test_client()
