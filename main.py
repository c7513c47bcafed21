"""Emoji translation entry point."""

import logging
import sys

from path import Path

from emojit import ResourceLoadError, RootConfig, initialize
from emojit.pipeline import Translator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "config" / "default.yaml"


def signal_handler(sig, frame):
    """Handle termination signals."""
    logger.info("Signal received, exiting gracefully...")
    exit(0)


def load_config(config_path: str | None = None) -> RootConfig:
    """Load configuration from file."""
    path = Path(config_path or DEFAULT_CONFIG)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return RootConfig.from_yaml(path)


def run_translate(translator: Translator, messages: list[str]) -> int:
    """Translate messages given on the command line or, if none, stdin lines."""
    if messages:
        print(translator.translate(" ".join(messages)))
        return 0

    for line in sys.stdin:
        print(translator.translate(line.rstrip("\n")))
    return 0


def run_server(config: RootConfig, translator: Translator) -> int:
    """Serve the translator over HTTP."""
    import uvicorn

    from emojit.server import ServerConfig, create_app

    server = ServerConfig(**config.server)
    logger.info(f"Listening on {server.host}:{server.port}")
    uvicorn.run(create_app(config, translator), host=server.host, port=server.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    import argparse

    parser = argparse.ArgumentParser(description="Rewrite messages with emoji")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    sub = parser.add_subparsers(dest="cmd", required=True)

    t = sub.add_parser("translate", help="Translate a message")
    t.add_argument("message", nargs="*", help="Message to translate, stdin when omitted")

    sub.add_parser("serve", help="Start the HTTP server")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        translator = initialize(config)
    except (FileNotFoundError, ValueError, ResourceLoadError) as e:
        logger.error(f"Initialization failed: {e}")
        return 1

    if args.cmd == "translate":
        return run_translate(translator, args.message)
    return run_server(config, translator)


if __name__ == "__main__":
    import signal

    # Configure logging
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Register signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    sys.exit(main())
