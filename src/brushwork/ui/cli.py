# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from brushwork.adapters.sqlalchemy import startup
from brushwork.api import create_app, filter_request_from_params
from brushwork.api.schema import EpisodeResponse
from brushwork.app import filter_episodes, list_vocabulary, load_catalog
from brushwork.config import (
    ConfigurationError,
    configure_logging,
    get_api_config,
    get_source_config,
)
from brushwork.domain.errors import InvalidRequestError
from brushwork.domain.model import DiagnosticKind, VocabularyKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from brushwork.adapters.sqlalchemy import Database

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load and query the Brushwork episode catalog")
    parser.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the local data dir)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    load = subparsers.add_parser("load", help="Reconcile the source files and load the catalog")
    load.add_argument(
        "--source-dir",
        type=Path,
        help="Directory holding the three source files (defaults to BRUSHWORK_SOURCE_DIR)",
    )
    load.add_argument(
        "--show-diagnostics",
        action="store_true",
        help="Print every malformed or orphaned record after the load",
    )

    query = subparsers.add_parser("query", help="Filter loaded episodes")
    query.add_argument("--months", type=str, help="Comma-separated month numbers (1-12)")
    query.add_argument("--tags", type=str, help="Comma-separated tag names")
    query.add_argument("--materials", type=str, help="Comma-separated material names")
    query.add_argument(
        "--mode",
        type=str,
        default="all",
        help="'all' requires every value and dimension, 'any' accepts one (default: %(default)s)",
    )

    subparsers.add_parser("materials", help="List known material names")
    subparsers.add_parser("tags", help="List known tag names")

    serve = subparsers.add_parser("serve", help="Run the HTTP query API")
    serve.add_argument("--host", type=str, help="Bind address (defaults to BRUSHWORK_API_HOST)")
    serve.add_argument("--port", type=int, help="Bind port (defaults to PORT)")

    return parser.parse_args(list(argv))


def _run_load(database: Database, args: argparse.Namespace) -> None:
    result = load_catalog(
        get_source_config(source_dir=args.source_dir),
        unit_of_work_factory=database.unit_of_work,
    )
    print(
        f"Loaded {result.persistence.episodes_written} episodes "
        f"({result.persistence.episodes_skipped} without a broadcast date skipped), "
        f"{result.persistence.materials} materials, {result.persistence.tags} tags, "
        f"{result.persistence.links} links; "
        f"{result.count(DiagnosticKind.MALFORMED_RECORD)} malformed and "
        f"{result.count(DiagnosticKind.ORPHAN_RECORD)} orphaned records"
    )
    if args.show_diagnostics:
        for diagnostic in result.diagnostics:
            print(
                f"  {diagnostic.kind.value} [{diagnostic.source.value}] "
                f"{diagnostic.title!r}: {diagnostic.message}"
            )


def _run_query(database: Database, args: argparse.Namespace) -> None:
    request = filter_request_from_params(
        months=args.months,
        tags=args.tags,
        materials=args.materials,
        mode=args.mode,
    )
    episodes = filter_episodes(request, unit_of_work_factory=database.unit_of_work)
    payload = [
        EpisodeResponse.from_view(episode).model_dump(mode="json", by_alias=True)
        for episode in episodes
    ]
    print(json.dumps(payload, indent=2))


def _print_vocabulary(database: Database, kind: VocabularyKind) -> None:
    for name in list_vocabulary(kind, unit_of_work_factory=database.unit_of_work):
        print(name)


def _run_serve(database: Database, args: argparse.Namespace) -> None:
    config = get_api_config()
    app = create_app(database.unit_of_work, config=config)
    uvicorn.run(app, host=args.host or config.host, port=args.port or config.port)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        database = startup(database_uri=parsed_args.database_uri)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Could not open the database")
        sys.exit(1)

    try:
        if parsed_args.command == "load":
            _run_load(database, parsed_args)
        elif parsed_args.command == "query":
            _run_query(database, parsed_args)
        elif parsed_args.command == "materials":
            _print_vocabulary(database, VocabularyKind.MATERIAL)
        elif parsed_args.command == "tags":
            _print_vocabulary(database, VocabularyKind.TAG)
        elif parsed_args.command == "serve":
            _run_serve(database, parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (InvalidRequestError, ConfigurationError) as exc:
        log.error("Invalid request: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)
    finally:
        database.dispose()


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
