"""Unit tests for domain value objects."""

from collections import Counter

import pytest

from perioscan.domain.value_objects import (
    VERIFICATION_ALPHABET,
    VERIFICATION_CODE_LENGTH,
    ContentHash,
    VerificationReason,
    generate_verification_code,
    is_well_formed_code,
)


def test_content_hash_valid() -> None:
    """ContentHash accepts 64 lowercase hex chars."""
    h = ContentHash(value="a" * 64)
    assert str(h) == "a" * 64


@pytest.mark.parametrize("value", ["short", "A" * 64, "g" * 64, "a" * 65])
def test_content_hash_invalid(value: str) -> None:
    with pytest.raises(ValueError, match="64 lowercase hex"):
        ContentHash(value=value)


def test_content_hash_compute_known_vector() -> None:
    h = ContentHash.compute("abc123", "Findings: fracture observed.", "Consistent with trauma.")
    assert h == ContentHash.compute(
        "abc123", "Findings: fracture observed.", "Consistent with trauma."
    )
    assert h != ContentHash.compute("abc123", "Findings: fracture observed.", "Inconclusive.")


def test_alphabet_excludes_ambiguous_characters() -> None:
    assert len(VERIFICATION_ALPHABET) == 32
    for c in "01OI":
        assert c not in VERIFICATION_ALPHABET


def test_verification_code_format() -> None:
    for _ in range(200):
        code = generate_verification_code()
        assert len(code) == VERIFICATION_CODE_LENGTH == 8
        assert is_well_formed_code(code)


def test_verification_code_does_not_collapse() -> None:
    """10k draws over 32^8 values: practically no collisions, flat symbol use."""
    codes = [generate_verification_code() for _ in range(10_000)]
    assert len(set(codes)) >= 9_990

    counts = Counter("".join(codes))
    assert set(counts) == set(VERIFICATION_ALPHABET)
    expected = 10_000 * VERIFICATION_CODE_LENGTH / len(VERIFICATION_ALPHABET)
    for symbol, count in counts.items():
        assert 0.8 * expected < count < 1.2 * expected, symbol


@pytest.mark.parametrize("code", ["", "ABCDEFG", "ABCDEFGHJ", "ABCDEFG0", "abcdefgh"])
def test_is_well_formed_code_rejects(code: str) -> None:
    assert not is_well_formed_code(code)


def test_every_reason_has_message() -> None:
    for reason in VerificationReason:
        assert reason.message
