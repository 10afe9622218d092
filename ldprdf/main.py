#!/usr/bin/env python3
"""
ldp-rdf CLI - print the RDF representation of a node from a fixture store.

Usage:
    python -m ldprdf.main --help
    python -m ldprdf.main store.yaml /books
    python -m ldprdf.main store.yaml /books/b1 --facets properties,references
"""

import argparse
import logging
import sys

from ldprdf.config.settings import load_config
from ldprdf.exceptions import RepositoryError
from ldprdf.identifiers import DefaultIdentifierTranslator
from ldprdf.rdf import ALL_FACETS, build_representation, parse_facets
from ldprdf.store import load_store_file
from ldprdf.utils.logging import add_file_handler, setup_colored_logging


def setup_logging(verbose: bool = False, debug: bool = False, level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, level)

    setup_colored_logging(level=log_level)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ldp-rdf",
        description="ldp-rdf - RDF projection of repository nodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full representation of a container
  python -m ldprdf.main store.yaml /books

  # Only inbound references, as seen by an anonymous user
  python -m ldprdf.main store.yaml /authors/a1 --facets references --user anonymous
        """,
    )

    parser.add_argument("fixture", help="YAML fixture describing the node store")
    parser.add_argument("node_id", help="Path of the node to describe (e.g. /books/b1)")

    parser.add_argument(
        "--facets",
        "-f",
        type=str,
        default=",".join(f.value for f in ALL_FACETS),
        help="Comma separated facets to include (default: all)",
    )

    parser.add_argument(
        "--user",
        "-u",
        type=str,
        default=None,
        help="User the store view is opened for (default: unrestricted)",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="ldprdf.yaml",
        help="Configuration file (default: ./ldprdf.yaml)",
    )

    parser.add_argument(
        "--base-uri",
        type=str,
        default=None,
        help="Base URI of published resources (default: from config)",
    )

    # Logging
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (very verbose)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_config(args.config)
        if args.base_uri:
            settings.identifiers.base_uri = args.base_uri
        facets = parse_facets(args.facets.split(","))
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(verbose=args.verbose, debug=args.debug, level=settings.logging.level)
    if settings.logging.file:
        add_file_handler(settings.logging.file)

    try:
        store = load_store_file(args.fixture)
        view = store.session(args.user)
        translator = DefaultIdentifierTranslator(settings.identifiers.base_uri)

        for triple in build_representation(args.node_id, view, translator, facets, settings):
            print(triple)

        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except RepositoryError as e:
        logging.exception("Representation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        print("Interrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        logging.exception("Representation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
