import hashlib

import pytest

from beacon_tokens import DegradedSecurity, InvalidFormat, Provenance, TokenSecurityConfig, create_token_service
from beacon_tokens.utils import TokenHasher, rolling_hash_hex


def test_hash_token_is_sha256_hex() -> None:
    digest = create_token_service().hash_token("ABCDEFGHJKLM")
    assert digest == hashlib.sha256(b"ABCDEFGHJKLM").hexdigest()
    assert len(digest) == 64
    assert digest == digest.lower()


def test_hash_token_is_deterministic() -> None:
    service = create_token_service()
    assert service.hash_token("WXYZ2345ABCD") == service.hash_token("WXYZ2345ABCD")


def test_single_character_change_changes_digest() -> None:
    service = create_token_service()
    base = "ABCDEFGHJKLM"
    variants = [base[:i] + "Z" + base[i + 1 :] for i in range(len(base))]
    digests = {service.hash_token(token) for token in [base, *variants]}
    assert len(digests) == len(variants) + 1


def test_hash_is_case_sensitive() -> None:
    service = create_token_service()
    assert service.hash_token("abcdefghjklm") != service.hash_token("ABCDEFGHJKLM")


@pytest.mark.parametrize("token", ["bad", "", None, "ABCD-EFGH-JK", "ABCDEFGHJKLMN"])
def test_hash_rejects_invalid_format(token) -> None:
    with pytest.raises(InvalidFormat):
        create_token_service().hash_token(token)


def test_invalid_format_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        create_token_service().hash_token("bad")


def test_digest_token_reports_secure_path() -> None:
    digest = create_token_service().digest_token("ABCDEFGHJKLM")
    assert digest.provenance is Provenance.SECURE
    assert digest.algorithm == "sha256"
    assert digest.degraded is False


def test_rolling_hash_values() -> None:
    assert rolling_hash_hex("A") == "41"
    assert rolling_hash_hex("AB") == "821"


def test_rolling_hash_wraps_to_signed_32_bits() -> None:
    value = int(rolling_hash_hex("ZZZZZZZZZZZZ"), 16)
    assert 0 <= value <= 2**31


def test_unavailable_algorithm_falls_back_to_rolling_hash() -> None:
    hasher = TokenHasher(algorithm="no-such-digest")
    digest = hasher.hash("ABCDEFGHJKLM")
    assert digest.provenance is Provenance.DEGRADED
    assert digest.algorithm == "rolling32"
    assert digest.hexdigest == rolling_hash_hex("ABCDEFGHJKLM")


def test_fallback_hash_refused_in_production() -> None:
    hasher = TokenHasher(algorithm="no-such-digest", production=True)
    with pytest.raises(DegradedSecurity):
        hasher.hash("ABCDEFGHJKLM")


def test_hash_does_not_recheck_entropy() -> None:
    assert len(create_token_service().hash_token("AAAAAAAAAAAA")) == 64


def test_hasher_rejects_wide_digest() -> None:
    with pytest.raises(ValueError):
        TokenHasher(algorithm="sha512")


def test_custom_token_length_round_trips_through_hashing() -> None:
    service = create_token_service(TokenSecurityConfig(token_length=16))
    token = service.generate_token()

    assert len(token) == 16
    assert service.is_valid_format(token) is True
    assert service.is_valid_format("ABCDEFGHJKLM") is False
    assert service.hash_token(token) == hashlib.sha256(token.encode("utf-8")).hexdigest()
    with pytest.raises(InvalidFormat):
        service.hash_token("ABCDEFGHJKLM")
