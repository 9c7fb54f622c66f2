"""Command line entry point."""

import argparse
import logging
import os
from pathlib import Path

import uvicorn

from flatwiki.config import Settings
from flatwiki.core.errors import InitializationError
from flatwiki.logging_setup import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def parse_args(argv=None):
    """
    Parse the arguments.
    """
    parser = argparse.ArgumentParser(prog="flatwiki", description="A wiki kept in flat files.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Log level")
    # Also accepted after the subcommand; SUPPRESS keeps a value given before it.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", choices=LOG_LEVELS, default=argparse.SUPPRESS, help="Log level")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", parents=[common], help="Run the wiki server")
    serve.add_argument("--host", default=None, help="Host to bind to (default: 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port to bind to (default: 9090)")
    serve.add_argument("--data-dir", type=Path, default=None, help="Directory holding page files")
    serve.add_argument("--template-dir", type=Path, default=None, help="Directory holding templates")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload on file changes")

    demo = sub.add_parser("demo", parents=[common], help="Save and reload a sample page")
    demo.add_argument(
        "--directory", type=Path, default=None, help="Where to write the page (default: cwd)"
    )

    greet = sub.add_parser("greet", parents=[common], help="Run the greeting server")
    greet.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    greet.add_argument("--port", type=int, default=9090, help="Port to bind to (default: 9090)")

    return parser.parse_args(argv)


def _settings_overrides(opts: argparse.Namespace) -> dict:
    overrides = {
        "host": opts.host,
        "port": opts.port,
        "data_dir": opts.data_dir,
        "template_dir": opts.template_dir,
        "log_level": opts.log_level,
    }
    return {k: v for k, v in overrides.items() if v is not None}


def serve(opts: argparse.Namespace) -> None:
    overrides = _settings_overrides(opts)
    settings = Settings(**overrides)
    setup_logging(settings.log_level)

    if opts.reload:
        # The reloader re-imports the app in a fresh process, so settings
        # travel through the environment.
        for key, value in overrides.items():
            os.environ[f"FLATWIKI_{key.upper()}"] = str(value)
        uvicorn.run(
            "flatwiki.main:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level,
        )
        return

    from flatwiki.main import create_app

    try:
        app = create_app(settings)
    except InitializationError as e:
        logger.critical("Cannot start wiki: %s", e)
        raise SystemExit(1) from e

    logger.info("Starting %s on %s:%d", settings.app_title, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


def main(argv=None) -> None:
    opts = parse_args(argv)

    if opts.command == "serve":
        serve(opts)
    elif opts.command == "demo":
        from flatwiki.demo import main as demo_main

        setup_logging(opts.log_level or "warning")
        demo_main(opts.directory)
    elif opts.command == "greet":
        from flatwiki.greeter import create_greeter_app

        setup_logging(opts.log_level or "info")
        uvicorn.run(create_greeter_app(), host=opts.host, port=opts.port)


if __name__ == "__main__":
    main()
