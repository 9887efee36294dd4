# Configuration and argument parsing setup
import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "gemini-2.0-flash"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class ProxyConfig:
    api_key: Optional[str] = None
    model_id: str = DEFAULT_MODEL_ID
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False


def load_config(env_file=None, host=None, port=None, debug=False):
    """
    Loads the proxy configuration from the environment (and a .env file, if present).

    Values given as arguments win over the environment. A missing GEMINI_API_KEY
    is only reported, the proxy still starts and every generation will fail.

    Returns:
    - ProxyConfig: The immutable configuration for this process.
    """
    load_dotenv(env_file)

    api_key = os.getenv("GEMINI_API_KEY") or None
    if not api_key:
        logger.warning("GEMINI_API_KEY environment variable is not set.")

    return ProxyConfig(
        api_key=api_key,
        model_id=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL_ID,
        host=host or os.getenv("HOST") or DEFAULT_HOST,
        port=int(port or os.getenv("PORT") or DEFAULT_PORT),
        debug=debug,
    )


def setup_argparser():
    """
    Sets up the argument parser for command-line arguments.

    Returns:
    - argparse.ArgumentParser: The configured ArgumentParser object.
    """
    parser = argparse.ArgumentParser(description="Run the Gemini prompt proxy locally.")

    parser.add_argument('--host', type=str, default=None,
                        help='Interface to bind (default: $HOST or 0.0.0.0)')
    parser.add_argument('--port', type=int, default=None,
                        help='Port to listen on (default: $PORT or 8080)')
    parser.add_argument('--debug', action='store_true',
                        help='Run the Flask development server in debug mode')
    parser.add_argument('--env-file', type=str, default=None,
                        help='Path to a .env file holding GEMINI_API_KEY')

    return parser


def parse_args(argv=None):
    """
    Parses the command-line arguments.

    Returns:
    - argparse.Namespace: The namespace containing the parsed arguments.
    """
    parser = setup_argparser()
    args = parser.parse_args(argv)
    return args
