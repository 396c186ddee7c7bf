"""
Authorization policy: an ordered table of path patterns and access rules.

Rules are evaluated top to bottom and the first matching pattern decides.
Patterns use shell-style wildcards (`fnmatch`, case-sensitive); `*` also
matches `/`. A path no rule matches requires authentication.
"""

from dataclasses import dataclass
from enum import Enum
from fnmatch import fnmatchcase
from typing import Iterable, Optional, Tuple

from basic_auth_platform.models.user import User


class Access(str, Enum):
    PERMIT_ALL = "permit_all"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class Rule:
    pattern: str
    access: Access

    def matches(self, path: str) -> bool:
        return fnmatchcase(path, self.pattern)


DEFAULT_RULES: Tuple[Rule, ...] = (
    Rule("/secured", Access.AUTHENTICATED),
    Rule("*", Access.PERMIT_ALL),
)


class AuthorizationPolicy:
    def __init__(self, rules: Iterable[Rule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def requirement_for(self, path: str) -> Access:
        for rule in self.rules:
            if rule.matches(path):
                return rule.access
        return Access.AUTHENTICATED

    def is_permitted(self, path: str, user: Optional[User]) -> bool:
        """True if a request for `path` by `user` (None = anonymous) may proceed."""
        if self.requirement_for(path) is Access.PERMIT_ALL:
            return True
        return user is not None
