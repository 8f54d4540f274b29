"""The dialect policy table."""

from smbprotocheck.core.constants import PROTOCOL_POLICY
from smbprotocheck.core.errors import MatrixError
from smbprotocheck.core.models import Dialect, DialectEntry


def parse_matrix(policy: str) -> tuple[DialectEntry, ...]:
    """Parse a whitespace separated list of +NAME / -NAME tokens."""
    entries: list[DialectEntry] = []
    for token in policy.split():
        sign, name = token[0], token[1:]
        if sign not in "+-":
            raise MatrixError(f"Policy token must start with + or -: {token!r}")
        try:
            dialect = Dialect(name)
        except ValueError:
            raise MatrixError(f"Unknown SMB dialect: {name!r}") from None
        entries.append(DialectEntry(dialect, expected_supported=sign == "+"))
    return tuple(entries)


PROTOCOL_MATRIX = parse_matrix(PROTOCOL_POLICY)
