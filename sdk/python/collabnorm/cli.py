"""Command-line entry point: ``collabnorm`` / ``python -m collabnorm``."""

import argparse
import logging
import sys
from collections.abc import Mapping

from collabnorm.client import CollabNormClient
from collabnorm.config import Settings
from collabnorm.exceptions import CollabNormError
from collabnorm.logging import configure_logging, get_logger
from collabnorm.normalizer import PermissionNormalizer

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="collabnorm",
        description=(
            "Downgrade every collaborator with push (write) access on a "
            "GitHub repository to pull (read). Reads the token from GITHUB_TOKEN."
        ),
    )
    parser.add_argument(
        "--repo",
        help="Target repository as owner/name (default: $COLLABNORM_REPOSITORY "
        "or thoughtbot/maybe_haskell)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report who would be downgraded",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        help="Retries on network errors (default: $COLLABNORM_MAX_RETRIES or 0)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every HTTP request",
    )
    return parser


def main(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level=logging.INFO,
        http_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        settings = Settings.from_env(
            environ, repository=args.repo, max_retries=args.max_retries
        )
        with CollabNormClient(settings) as client:
            normalizer = PermissionNormalizer(
                client.collaborators,
                page_size=settings.page_size,
                dry_run=args.dry_run,
            )
            normalizer.normalize()
    except CollabNormError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
