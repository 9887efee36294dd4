from unittest import mock

import pytest

from gemini_proxy.call_llm import GeminiGenerator, GenerationError


def fake_response(text, finish_reason="STOP", candidates=True):
    response = mock.Mock()
    response.text = text
    if candidates:
        response.candidates = [mock.Mock(finish_reason=finish_reason)]
    else:
        response.candidates = []
        response.prompt_feedback = mock.Mock(block_reason="SAFETY")
    return response


def test_generate_returns_text():
    client = mock.Mock()
    client.models.generate_content.return_value = fake_response("Hi there!")

    text = GeminiGenerator(api_key="k", client=client).generate("gemini-2.0-flash", "Hello")

    assert text == "Hi there!"
    client.models.generate_content.assert_called_once_with(model="gemini-2.0-flash", contents="Hello")


def test_empty_response_raises():
    client = mock.Mock()
    client.models.generate_content.return_value = fake_response(None, finish_reason="SAFETY")

    with pytest.raises(GenerationError, match="SAFETY"):
        GeminiGenerator(api_key="k", client=client).generate("gemini-2.0-flash", "Hello")


def test_blocked_prompt_raises():
    client = mock.Mock()
    client.models.generate_content.return_value = fake_response(None, candidates=False)

    with pytest.raises(GenerationError, match="SAFETY"):
        GeminiGenerator(api_key="k", client=client).generate("gemini-2.0-flash", "Hello")


def test_sdk_errors_propagate():
    client = mock.Mock()
    client.models.generate_content.side_effect = ConnectionError("network down")

    with pytest.raises(ConnectionError):
        GeminiGenerator(api_key="k", client=client).generate("gemini-2.0-flash", "Hello")


def test_missing_key_fails_on_call():
    generator = GeminiGenerator(api_key=None)

    with pytest.raises(GenerationError, match="GEMINI_API_KEY"):
        generator.generate("gemini-2.0-flash", "Hello")


def test_client_is_created_once():
    with mock.patch("gemini_proxy.call_llm.genai.Client") as client_cls:
        client_cls.return_value.models.generate_content.return_value = fake_response("ok")
        generator = GeminiGenerator(api_key="secret")

        generator.generate("gemini-2.0-flash", "a")
        generator.generate("gemini-2.0-flash", "b")

    client_cls.assert_called_once_with(api_key="secret")
