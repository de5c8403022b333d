"""Identity helpers.

An identity is an opaque, equality-comparable principal supplied by the
execution environment for each operation. The ledger never inspects its
structure beyond comparing it with the reserved burn identity.
"""

from __future__ import annotations

Identity = str

# Null/burn principal. It can never hold the authority role.
BURN_IDENTITY: Identity = "SP000000000000000000002Q6VF78"

RESERVED_IDENTITIES: frozenset[Identity] = frozenset({BURN_IDENTITY})


def is_reserved_identity(identity: Identity | None) -> bool:
    """Return True if the identity is empty or reserved.

    Args:
        identity: Candidate identity, possibly None.

    Returns:
        True when the identity cannot act as a principal.
    """
    if identity is None or not identity.strip():
        return True
    return identity in RESERVED_IDENTITIES
