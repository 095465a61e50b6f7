"""Token signer port - encodes signing assertions into tamper-evident tokens."""

from typing import Any, Protocol


class TokenSigner(Protocol):
    """Port for signing and verifying structured claims with a bound secret."""

    def encode(self, claims: dict[str, Any]) -> str: ...

    def decode(self, token: str) -> dict[str, Any]:
        """Return verified claims or raise InvalidToken."""
        ...
