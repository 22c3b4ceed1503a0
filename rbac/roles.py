# UniResearch - Role -> permission table (built once at import, read-only afterwards)
import enum
from types import MappingProxyType
from typing import Iterable, Mapping

from . import permissions as P


class RoleTableError(RuntimeError):
    """Raised at startup when a composed role misses an inherited permission."""


class Role(str, enum.Enum):
    faculty = "faculty"
    hod = "hod"
    dean = "dean"
    oric = "oric"
    admin = "admin"
    external = "external"


def compose(base: Iterable[str], additions: Iterable[str]) -> frozenset[str]:
    """All permissions of `base` plus `additions`. Inputs are left untouched."""
    return frozenset(base) | frozenset(additions)


def _build_table() -> dict[str, frozenset[str]]:
    # Order matters: faculty -> hod -> {dean, oric}. admin and external stand alone.
    faculty = frozenset(
        [P.FACULTY_READ, P.FACULTY_UPDATE]  # update: own profile
        + P.research("create")
        + P.research("read")
        + P.research("update")  # own records
        + [P.DASHBOARD_VIEW]
    )

    # Department level
    hod = compose(
        faculty,
        [P.FACULTY_APPROVE] + P.research("approve") + [P.REPORTS_VIEW, P.ANALYTICS_VIEW],
    )

    # School level
    dean = compose(
        hod,
        [P.USER_CREATE, P.USER_READ, P.USER_UPDATE, P.FACULTY_CREATE, P.FACULTY_DELETE]
        + P.research("delete"),
    )

    # Office of Research, Innovation & Commercialization: university-wide review
    oric = compose(
        faculty,
        [P.USER_READ, P.FACULTY_READ]
        + P.research("approve")
        + P.research("review")
        + [P.REPORTS_VIEW, P.ANALYTICS_VIEW],
    )

    admin = P.ALL_PERMISSIONS

    # Public portal: read-only
    external = frozenset([P.FACULTY_READ] + P.research("read"))

    return {
        Role.faculty.value: faculty,
        Role.hod.value: hod,
        Role.dean.value: dean,
        Role.oric.value: oric,
        Role.admin.value: admin,
        Role.external.value: external,
    }


ROLE_PERMISSIONS: Mapping[str, frozenset[str]] = MappingProxyType(_build_table())

# (lower role, higher role): higher must hold everything lower holds
ROLE_HIERARCHY: tuple[tuple[Role, Role], ...] = (
    (Role.faculty, Role.hod),
    (Role.hod, Role.dean),
    (Role.faculty, Role.oric),
)

_EMPTY: frozenset[str] = frozenset()


def permissions_for(role: str) -> frozenset[str]:
    """Permission set for `role`; an unknown role has none."""
    return ROLE_PERMISSIONS.get(role, _EMPTY)


def verify_hierarchy(table: Mapping[str, frozenset[str]] = ROLE_PERMISSIONS) -> None:
    for lower, higher in ROLE_HIERARCHY:
        missing = table.get(lower.value, _EMPTY) - table.get(higher.value, _EMPTY)
        if missing:
            raise RoleTableError(
                f"role {higher.value!r} is missing permissions inherited from "
                f"{lower.value!r}: {sorted(missing)}"
            )


verify_hierarchy()
