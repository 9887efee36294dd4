import logging

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed

from gemini_proxy.call_llm import GeminiGenerator
from gemini_proxy.config import load_config
from gemini_proxy.payloads import (
    GENERATION_FAILED,
    PROMPT_REQUIRED,
    AnalysisResponse,
    ErrorResponse,
    InboundRequest,
)

logger = logging.getLogger(__name__)

# Cache preflight for 1 hour
PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "3600",
}


def create_app(config=None, generator=None):
    """
    Builds the Flask app that proxies prompts to Gemini.

    Any path accepts POST (generate) and OPTIONS (CORS preflight); every other
    method is answered with 405.

    Returns:
    - Flask: The configured application.
    """
    if config is None:
        config = load_config()
    if generator is None:
        generator = GeminiGenerator(api_key=config.api_key)

    app = Flask(__name__)
    # Wildcard origin on every response, error responses included
    CORS(app, origins="*", send_wildcard=True)

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(error):
        allowed = ", ".join(sorted(error.valid_methods or []))
        return Response("Method Not Allowed", status=405, mimetype="text/plain", headers={"Allow": allowed})

    @app.route("/", defaults={"path": ""}, methods=["POST", "OPTIONS"])
    @app.route("/<path:path>", methods=["POST", "OPTIONS"])
    def gemini_proxy(path):
        if request.method == "OPTIONS":
            preflight = Response(status=204, headers=PREFLIGHT_HEADERS)
            # No content, so no Content-Type either
            del preflight.headers["Content-Type"]
            return preflight

        outbound = handle(InboundRequest.from_flask(request), config.model_id, generator)
        return jsonify(outbound.to_json()), outbound.status

    return app


def handle(inbound, model_id, generator):
    """Turns a validated POST into exactly one analysis or error response."""
    if inbound.prompt is None:
        return ErrorResponse(PROMPT_REQUIRED, status=400)

    try:
        text = generator.generate(model_id, inbound.prompt)
    except Exception:
        # Never leak upstream details to the client
        logger.exception("Error during Gemini API call")
        return ErrorResponse(GENERATION_FAILED)

    return AnalysisResponse(text)
