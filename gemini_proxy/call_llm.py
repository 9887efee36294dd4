import logging
from typing import Protocol

from google import genai

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when Gemini could not produce text for a prompt."""


class TextGenerationService(Protocol):
    def generate(self, model_id: str, prompt: str) -> str:
        ...


class GeminiGenerator:
    """
    Sends prompts to the Gemini API through the google-genai SDK.

    The SDK client is created on the first call, so a process without an API key
    can still start; each call then fails with a GenerationError.
    """

    def __init__(self, api_key=None, client=None):
        self.api_key = api_key
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise GenerationError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, model_id: str, prompt: str) -> str:
        logger.info("Calling %s with a %d character prompt", model_id, len(prompt))
        response = self.client.models.generate_content(model=model_id, contents=prompt)

        text = response.text
        if not text:
            # Blocked or empty candidates (SAFETY, RECITATION, MAX_TOKENS without parts)
            raise GenerationError(f"Gemini returned no text (finish_reason={_finish_reason(response)})")
        return text


def _finish_reason(response):
    if not response.candidates:
        feedback = response.prompt_feedback
        return getattr(feedback, "block_reason", None)
    return response.candidates[0].finish_reason
