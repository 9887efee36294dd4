from dataclasses import asdict, dataclass
from typing import Optional

PROMPT_REQUIRED = "Prompt is required in the request body."
GENERATION_FAILED = "An error occurred while processing your request. Please try again later."


@dataclass(frozen=True)
class InboundRequest:
    method: str
    prompt: Optional[str] = None

    @classmethod
    def from_flask(cls, request):
        data = request.get_json(silent=True)
        prompt = data.get("prompt") if isinstance(data, dict) else None
        # Only a non-empty string counts as a prompt
        if not isinstance(prompt, str) or not prompt:
            prompt = None
        return cls(method=request.method, prompt=prompt)


@dataclass(frozen=True)
class AnalysisResponse:
    analysis: str
    status = 200

    def to_json(self):
        return asdict(self)


@dataclass(frozen=True)
class ErrorResponse:
    error: str
    status: int = 500

    def to_json(self):
        return {"error": self.error}
