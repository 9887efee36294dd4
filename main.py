import logging
import os

from gemini_proxy.app import create_app
from gemini_proxy.config import load_config, parse_args

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Read once at process start; a missing GEMINI_API_KEY is reported here
app = create_app()


def gemini_proxy(request):
    """
    Cloud Functions entry point.

    Responds to HTTP requests, acting as a proxy for the Gemini API. The
    function's request is dispatched through the Flask app so both deployments
    share one code path.
    """
    with app.request_context(request.environ):
        return app.full_dispatch_request()


def main(argv=None):
    args = parse_args(argv)
    config = load_config(env_file=args.env_file, host=args.host, port=args.port, debug=args.debug)
    create_app(config).run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
