"""Identity registry stub for development and testing.

By default every identity counts as registered, which is the reference
behaviour of the ledger. Tests can switch to an explicit allow-list.
"""

from __future__ import annotations

from feedback_ledger.application.ports.identity_registry import (
    IdentityRegistryProtocol,
)


class IdentityRegistryStub(IdentityRegistryProtocol):
    """In-memory registration oracle.

    Attributes:
        _register_all: When True, every identity is registered.
        _registered: Explicit allow-list used when _register_all is False.
    """

    def __init__(
        self,
        register_all: bool = True,
        registered: set[str] | None = None,
    ) -> None:
        self._register_all = register_all
        self._registered: set[str] = set(registered or ())

    async def is_registered(self, identity: str) -> bool:
        if self._register_all:
            return True
        return identity in self._registered

    # Test helper methods

    def register(self, identity: str) -> None:
        """Add an identity to the allow-list."""
        self._registered.add(identity)

    def unregister(self, identity: str) -> None:
        """Remove an identity from the allow-list."""
        self._registered.discard(identity)

    def set_register_all(self, register_all: bool) -> None:
        """Switch between open registration and the allow-list."""
        self._register_all = register_all

    @classmethod
    def allow_list(cls, *identities: str) -> IdentityRegistryStub:
        """Factory for a stub that only knows the given identities."""
        return cls(register_all=False, registered=set(identities))
