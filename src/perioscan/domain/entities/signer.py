"""Identity of the user signing a document."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Signer:
    """Signer identity as supplied by the authorization layer."""

    id: str
    name: str
    email: str
    role: str

    def to_claims(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role}
