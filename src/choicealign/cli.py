"""CLI entrypoint for choicealign."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import BaseModel, ValidationError

from choicealign.config import configure_logging, load_config
from choicealign.core import run_find, run_recognize, run_tokenize
from choicealign.io import to_json, write_json
from choicealign.models import ChoicesRequest, MatchOptions, TokenizeRequest


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="choicealign",
        description="Recognize choices in free-text utterances.",
    )
    subparsers = parser.add_subparsers(dest="command")

    tokenize = subparsers.add_parser("tokenize", help="Split text into tokens")
    tokenize.add_argument("text", help="Text to tokenize")
    tokenize.add_argument("--locale", default=None, help="Locale of the text (optional)")
    _add_output_argument(tokenize)

    find = subparsers.add_parser("find", help="Match choices by name or synonym")
    _add_choice_arguments(find)

    recognize = subparsers.add_parser(
        "recognize",
        help="Match choices by name, then ordinal position, then index",
    )
    _add_choice_arguments(recognize)
    recognize.add_argument(
        "--no-ordinals",
        action="store_true",
        help="Disable the ordinal fallback",
    )
    recognize.add_argument(
        "--no-numbers",
        action="store_true",
        help="Disable the numeric index fallback",
    )

    serve = subparsers.add_parser("serve", help="Run the choicealign HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def _add_choice_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("utterance", help="User utterance to search")
    parser.add_argument("choices", nargs="+", help="Choice values in order")
    parser.add_argument("--locale", default=None, help="Locale of the utterance (optional)")
    parser.add_argument(
        "--partial",
        action="store_true",
        help="Accept matches where only some tokens of a choice were found",
    )
    parser.add_argument(
        "--max-token-distance",
        type=int,
        default=None,
        help="Maximum number of skipped tokens between matched choice tokens",
    )
    parser.add_argument(
        "--fuzzy",
        action="store_true",
        help="Tolerate small typos in choice tokens",
    )
    _add_output_argument(parser)


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config.log_level)

    if args.command == "tokenize":
        response = run_tokenize(TokenizeRequest(text=args.text, locale=args.locale), config)
        return _emit(response, args.output)

    if args.command in {"find", "recognize"}:
        try:
            request = ChoicesRequest(
                utterance=args.utterance,
                choices=args.choices,
                options=MatchOptions(
                    locale=args.locale,
                    allow_partial_matches=args.partial,
                    max_token_distance=args.max_token_distance,
                    fuzzy_matching=args.fuzzy,
                    recognize_ordinals=not getattr(args, "no_ordinals", False),
                    recognize_numbers=not getattr(args, "no_numbers", False),
                ),
            )
        except ValidationError as exc:
            parser.error(str(exc))
        if args.command == "find":
            return _emit(run_find(request, config), args.output)
        return _emit(run_recognize(request, config), args.output)

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`choicealign serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "choicealign.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _emit(response: BaseModel, output: str | None) -> int:
    if output:
        write_json(response, output)
        print(f"Wrote JSON to {output}")
        return 0
    print(to_json(response))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
