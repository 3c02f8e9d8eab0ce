from typing import Iterable, Optional

from libs.result import Error, Result, Return
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import Role


def check_role(principal: Optional[UserInfo], allowed: Iterable[Role]) -> Result[UserInfo]:
    """
    Second stage of the access gate.

    Fails closed: no principal, an unknown role, or a role outside
    ``allowed`` are all FORBIDDEN.
    """
    forbidden = Error("FORBIDDEN", "Access denied: Insufficient permissions")

    if principal is None:
        return Return.err(forbidden)

    try:
        role = Role(principal.role)
    except ValueError:
        return Return.err(forbidden)

    if role not in {Role(r) for r in allowed}:
        return Return.err(forbidden)

    return Return.ok(principal)
