"""
Command-line interface for the Gopher translator.

Provides CLI commands:
- run: Start the HTTP API server
- translate: Translate a word or sentence without starting the server
- history: Print the recorded translation history

Usage:
    gopher-translator run [--port PORT] [--host HOST]
    gopher-translator translate apple
    gopher-translator translate --sentence "I see."
    gopher-translator history [--records | --clear]

Environment Variables:
    GOPHER_HOST: Host to bind API server (default: 0.0.0.0)
    GOPHER_PORT: Port for API server (default: 8080)
    GOPHER_HISTORY_PATH: History log location (default: ./history.txt)
"""

import argparse
import os
import sys

from gopher_translator.config import config


def _history_store():
    """Build a history store from the current configuration."""
    from gopher_translator.history import HistoryStore

    return HistoryStore(config.history.absolute_path, strict=config.history.strict_records)


def _run_api_server(host: str | None, port: int | None) -> None:
    """
    Start the FastAPI server.

    The import is done inside the function so that commands which never
    serve HTTP do not pay for importing FastAPI and uvicorn.
    """
    from gopher_translator.api.server import start_server

    start_server(host=host, port=port)


def cmd_run(args: argparse.Namespace) -> int:
    """
    Run the API server.

    Configuration Priority:
        1. CLI arguments (--port, --host)
        2. Environment variables (GOPHER_PORT, GOPHER_HOST)
        3. Config file / default values (8080, 0.0.0.0)

    Returns:
        0 on clean shutdown (Ctrl+C), 1 on startup error
    """
    port = getattr(args, "port", None)
    host = getattr(args, "host", None)

    if port is None:
        port = int(os.environ.get("GOPHER_PORT", config.server.port))
    if host is None:
        host = os.environ.get("GOPHER_HOST", config.server.host)

    if not 0 < port < 65536:
        print(f"Error: invalid port {port}.", file=sys.stderr)
        return 1

    try:
        _run_api_server(host, port)
        return 0
    except KeyboardInterrupt:
        print("\nServer stopped.")
        return 0
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        return 1


def cmd_translate(args: argparse.Namespace) -> int:
    """
    Translate text given on the command line and print the result.

    With ``--sentence`` multiple positional arguments are joined with single
    spaces.  Word mode accepts exactly one word; several words are an error
    rather than one token containing spaces.  Unless ``--no-record`` is
    given, the translation is appended to the history log exactly as the
    HTTP endpoints would record it.

    Returns:
        0 on success, 1 on invalid input or history failure
    """
    from gopher_translator.history import HistoryError
    from gopher_translator.translation import (
        InvalidInputError,
        transform_sentence,
        transform_word,
    )

    text = " ".join(args.text)
    if not args.sentence and len(text.split()) > 1:
        print(
            "Error: word mode takes a single word; use --sentence for several words.",
            file=sys.stderr,
        )
        return 1

    try:
        if args.sentence:
            text = text.strip()
            translated = transform_sentence(text)
        else:
            translated = transform_word(text)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.no_record:
        try:
            _history_store().append(text, translated)
        except HistoryError as e:
            print(f"Error recording translation: {e}", file=sys.stderr)
            return 1

    print(translated)
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    """
    Print the translation history in stored-line sort order, or delete it
    with ``--clear``.

    Returns:
        0 on success, 1 if the log cannot be read
    """
    from gopher_translator.history import HistoryError

    store = _history_store()

    if args.clear:
        try:
            store.clear()
        except HistoryError as e:
            print(f"Error clearing history: {e}", file=sys.stderr)
            return 1
        print(f"Cleared {store.path}")
        return 0

    try:
        records = store.read_all()
    except HistoryError as e:
        print(f"Error reading history: {e}", file=sys.stderr)
        return 1

    if not records:
        print("No translations recorded yet.")
        return 0

    for record in records:
        if args.records:
            print(f"{record.original}\t{record.translated}")
        else:
            print(f"{record.original} -> {record.translated}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gopher-translator",
        description="Gopher Translator - English to Gopher translation service",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser(
        "run",
        help="Run the API server",
        description="Start the HTTP API server.",
    )
    run_parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="API server port (default: 8080, or GOPHER_PORT env var)",
    )
    run_parser.add_argument(
        "--host",
        type=str,
        help="Host to bind the server to (default: 0.0.0.0, or GOPHER_HOST env var)",
    )
    run_parser.set_defaults(func=cmd_run)

    translate_parser = subparsers.add_parser(
        "translate",
        help="Translate a word or sentence",
        description="Translate English text to Gopher and print the result.",
    )
    translate_parser.add_argument("text", nargs="+", help="Word (or sentence with --sentence)")
    translate_parser.add_argument(
        "--sentence",
        "-s",
        action="store_true",
        help="Treat the text as a sentence ending in punctuation",
    )
    translate_parser.add_argument(
        "--no-record",
        action="store_true",
        help="Do not append the translation to the history log",
    )
    translate_parser.set_defaults(func=cmd_translate)

    history_parser = subparsers.add_parser(
        "history",
        help="Print the translation history",
        description="Print every recorded translation in sorted order.",
    )
    history_parser.add_argument(
        "--records",
        action="store_true",
        help="Print tab-separated original/translated pairs",
    )
    history_parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete the history log instead of printing it",
    )
    history_parser.set_defaults(func=cmd_history)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
