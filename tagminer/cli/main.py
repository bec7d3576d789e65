import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import Settings, load_settings
from ..errors import TagMinerError
from ..utils.logger import configure_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="tagminer",
        description="tagminer - tag frequency reports for JSON document trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="YAML settings file (optional)"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Serve the report over HTTP when no subcommand is given",
    )
    _add_input_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _add_report_subparser(subparsers)
    _add_serve_subparser(subparsers)

    return parser


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command. Unset options fall back to settings."""
    parser.add_argument(
        "-d",
        "--data-dir",
        type=Path,
        default=argparse.SUPPRESS,
        help="Directory holding the JSON documents (default: data)",
    )
    parser.add_argument(
        "-t",
        "--tags-file",
        type=Path,
        default=argparse.SUPPRESS,
        help="Vocabulary file, one tag per line (default: tags.txt)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Fail on malformed JSON instead of skipping the file",
    )
    parser.add_argument(
        "--sort-files",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Process files in lexicographic order",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=argparse.SUPPRESS,
        help="Number of parallel file readers (default: 4)",
    )


def _add_report_subparser(subparsers):
    """Add the report subcommand."""
    report_parser = subparsers.add_parser(
        "report", help="Print the tag frequency report to the console"
    )
    _add_input_arguments(report_parser)
    report_parser.add_argument(
        "--separator",
        default=argparse.SUPPRESS,
        help="Line separator for the report (default: newline)",
    )
    report_parser.add_argument(
        "--table", action="store_true", help="Print a formatted table instead"
    )


def _add_serve_subparser(subparsers):
    """Add the serve subcommand."""
    serve_parser = subparsers.add_parser(
        "serve", help="Serve the tag frequency report over HTTP"
    )
    _add_input_arguments(serve_parser)
    serve_parser.add_argument(
        "--host", default=argparse.SUPPRESS, help="Interface to bind (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--port", type=int, default=argparse.SUPPRESS, help="Port (default: 9000)"
    )


_SETTING_ARGS = (
    "data_dir",
    "tags_file",
    "strict",
    "sort_files",
    "workers",
    "separator",
    "host",
    "port",
)


def settings_from_args(args) -> Settings:
    overrides = {name: getattr(args, name, None) for name in _SETTING_ARGS}
    if overrides.get("separator") is not None:
        overrides["separator"] = (
            overrides["separator"].replace("\\n", "\n").replace("\\t", "\t")
        )
    return load_settings(args.config, overrides=overrides)


def cmd_report(args, settings: Settings) -> int:
    """Execute the report command."""
    from ..pipeline import TagPipeline
    from ..visualizers.text_report import render, render_table

    report = TagPipeline(settings).run()

    if getattr(args, "table", False):
        Console().print(render_table(report.ranked))
    else:
        print(render(report.ranked, settings.separator))

    return 0


def cmd_serve(args, settings: Settings) -> int:
    """Execute the serve command."""
    from ..server.app import create_app

    app = create_app(settings)
    logger.info(
        f"Serving tag report for {settings.data_dir} on "
        f"http://{settings.host}:{settings.port}"
    )
    app.run(host=settings.host, port=settings.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        settings = settings_from_args(args)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    command = args.command
    if command is None:
        command = "serve" if args.http or settings.is_production else "report"
        if command == "report":
            logger.info("Console only output")

    commands = {
        "report": cmd_report,
        "serve": cmd_serve,
    }

    try:
        return commands[command](args, settings)
    except (TagMinerError, OSError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
