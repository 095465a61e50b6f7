"""Human-readable verification codes printed on signed documents."""

import secrets

# No 0/O, 1/I: codes are typed by hand from printouts.
VERIFICATION_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
VERIFICATION_CODE_LENGTH = 8


def generate_verification_code(length: int = VERIFICATION_CODE_LENGTH) -> str:
    """Draw `length` symbols uniformly from the unambiguous alphabet."""
    return "".join(secrets.choice(VERIFICATION_ALPHABET) for _ in range(length))


def is_well_formed_code(code: str) -> bool:
    """True if code has the expected length and only alphabet symbols."""
    return len(code) == VERIFICATION_CODE_LENGTH and all(
        c in VERIFICATION_ALPHABET for c in code
    )
