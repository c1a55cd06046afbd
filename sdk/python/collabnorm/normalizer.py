"""
Collaborator permission normalizer.

Walks every page of a repository's collaborators and downgrades everyone
holding the source permission (push) to the target permission (pull).
Admins and read-only collaborators are never touched, so a second run
changes nothing.
"""

from collections.abc import Callable

from collabnorm.config import DEFAULT_PAGE_SIZE
from collabnorm.directory import CollaboratorDirectory
from collabnorm.logging import get_logger
from collabnorm.types.collaborators import NormalizeResult, Permission

logger = get_logger("normalizer")


class PermissionNormalizer:
    """Downgrades every collaborator at one permission level to another."""

    def __init__(
        self,
        directory: CollaboratorDirectory,
        page_size: int = DEFAULT_PAGE_SIZE,
        source: Permission = Permission.PUSH,
        target: Permission = Permission.PULL,
        dry_run: bool = False,
        echo: Callable[[str], None] = print,
    ) -> None:
        """
        Initialize the normalizer.

        Args:
            directory: Backend to list and update collaborators
            page_size: Records requested per page
            source: Permission level to downgrade
            target: Permission level to set instead
            dry_run: Report downgrades without issuing write requests
            echo: Line writer for progress output (default: print to stdout)
        """
        if source is Permission.NONE:
            raise ValueError("Source permission cannot be none")
        if source is target:
            raise ValueError(f"Source and target permission are both {source.value}")

        self.directory = directory
        self.page_size = page_size
        self.source = source
        self.target = target
        self.dry_run = dry_run
        self.echo = echo

    def normalize(self) -> NormalizeResult:
        """
        Run one pass over all collaborators.

        Paging stops at the first empty page. Any error raised by the
        directory propagates immediately; nothing after it is fetched or
        updated.

        Returns:
            NormalizeResult with the total number of collaborators seen
        """
        result = NormalizeResult(dry_run=self.dry_run)
        page = 1

        while True:
            self.echo(f"Fetching page {page}")
            collaborators = self.directory.list_page(page, self.page_size)
            result.pages += 1

            if not collaborators:
                break

            for collaborator in collaborators:
                if collaborator.permission is Permission.NONE:
                    result.anomalies.append(collaborator.login)
                    continue
                if collaborator.permission is not self.source:
                    continue

                if self.dry_run:
                    self.echo(
                        f"Would downgrade {collaborator.login} "
                        f"from {self.source.value} to {self.target.value}"
                    )
                else:
                    self.echo(
                        f"Downgrading {collaborator.login} "
                        f"from {self.source.value} to {self.target.value}"
                    )
                    self.directory.set_permission(collaborator.login, self.target)
                result.downgraded.append(collaborator.login)

            result.total += len(collaborators)
            page += 1

        logger.info(
            "Saw %d collaborators across %d pages, %s %d",
            result.total,
            result.pages,
            "would downgrade" if self.dry_run else "downgraded",
            len(result.downgraded),
        )
        if result.anomalies:
            logger.warning(
                "Collaborators without any permission flag: %s",
                ", ".join(result.anomalies),
            )

        self.echo(f"Total collaborators: {result.total}")
        return result


def normalize(
    directory: CollaboratorDirectory,
    page_size: int = DEFAULT_PAGE_SIZE,
    dry_run: bool = False,
    echo: Callable[[str], None] = print,
) -> int:
    """
    Downgrade every push collaborator to pull.

    Returns:
        Total number of collaborators observed across all pages
    """
    normalizer = PermissionNormalizer(
        directory, page_size=page_size, dry_run=dry_run, echo=echo
    )
    return normalizer.normalize().total
