"""Collaborator-related data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from collabnorm.exceptions import DecodeError


class Permission(str, Enum):
    """Repository permission level, highest to lowest."""

    ADMIN = "admin"
    PUSH = "push"
    PULL = "pull"
    NONE = "none"  # no flag set; a data anomaly, not an access level

    @classmethod
    def from_flags(cls, admin: bool, push: bool, pull: bool) -> "Permission":
        """
        Collapse the API's boolean permission flags into one level.

        The first true flag wins in admin > push > pull order.

        Args:
            admin: The "admin" flag from the API
            push: The "push" flag from the API
            pull: The "pull" flag from the API

        Returns:
            The highest permission whose flag is set, or NONE
        """
        if admin:
            return cls.ADMIN
        if push:
            return cls.PUSH
        if pull:
            return cls.PULL
        return cls.NONE


@dataclass(frozen=True)
class Collaborator:
    """One user's access record on the hosted repository."""

    login: str
    permission: Permission

    @classmethod
    def from_api(cls, data: Any) -> "Collaborator":
        """
        Build a Collaborator from one element of the collaborators listing.

        Raises:
            DecodeError: If the record does not have the expected shape
        """
        if not isinstance(data, dict) or not isinstance(data.get("login"), str):
            raise DecodeError(f"Collaborator record has no login: {data!r}")

        flags = data.get("permissions") or {}
        if not isinstance(flags, dict):
            raise DecodeError(
                f"Collaborator {data['login']} has malformed permissions: {flags!r}"
            )

        values = {name: flags.get(name, False) for name in ("admin", "push", "pull")}
        for name, value in values.items():
            if not isinstance(value, bool):
                raise DecodeError(
                    f"Collaborator {data['login']} has non-boolean {name} flag: {value!r}"
                )

        return cls(login=data["login"], permission=Permission.from_flags(**values))


@dataclass
class NormalizeResult:
    """Summary of one normalize run."""

    total: int = 0
    pages: int = 0
    downgraded: list[str] = field(default_factory=list)
    anomalies: list[str] = field(default_factory=list)
    dry_run: bool = False
