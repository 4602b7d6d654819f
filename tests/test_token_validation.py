import pytest

from beacon_tokens import CollisionRisk, create_token_service
from beacon_tokens.token import TokenSanitizer, is_valid_format


def test_validate_generation_alphabet_token() -> None:
    result = create_token_service().validate_token("ABCDEFGHJKLM")
    assert result.is_valid is True
    assert result.error is None
    assert result.entropy is not None and result.entropy >= 40
    assert result.collision_risk is CollisionRisk.HIGH


def test_validate_short_token_mentions_length() -> None:
    service = create_token_service()
    result = service.validate_token("short")
    assert result.is_valid is False
    assert "length" in result.error
    assert "12" in result.error
    assert result.entropy is None
    assert service.get_security_metrics().validation_failures == 1


@pytest.mark.parametrize("candidate", [None, "", 123, b"ABCDEFGHJKLM", ["A"] * 12])
def test_validate_rejects_non_strings(candidate) -> None:
    result = create_token_service().validate_token(candidate)
    assert result.is_valid is False
    assert result.error == "Token must be a non-empty string"


def test_validate_rejects_invalid_characters() -> None:
    result = create_token_service().validate_token("ABCD-EFGH-JK")
    assert result.is_valid is False
    assert result.error == "Token contains invalid characters"


def test_length_check_runs_before_character_check() -> None:
    result = create_token_service().validate_token("AB-CD")
    assert "length" in result.error


def test_validate_low_entropy_reports_entropy_and_risk() -> None:
    service = create_token_service()
    result = service.validate_token("AAAAAAAAAAAA")
    assert result.is_valid is False
    assert result.error == "Token entropy too low"
    assert result.entropy == 0.0
    assert result.collision_risk is CollisionRisk.HIGH
    assert service.get_security_metrics().validation_failures == 1


def test_validate_accepts_lower_and_mixed_case() -> None:
    assert create_token_service().validate_token("abcdefGHJKLM").is_valid is True


def test_every_rejection_counts_once() -> None:
    service = create_token_service()
    for candidate in ["", "short", "ABCD-EFGH-JK", "AAAAAAAAAAAA", "ABCDEFGHJKLM"]:
        service.validate_token(candidate)
    assert service.get_security_metrics().validation_failures == 4


@pytest.mark.parametrize("token", ["ABCDEFGHJKLM", "abcdefghjklm", "A1b2C3d4E5f6", "000000000000"])
def test_is_valid_format_accepts_12_alphanumerics(token) -> None:
    assert is_valid_format(token) is True


@pytest.mark.parametrize(
    "token",
    [None, "", "short", "ABCDEFGHJKLMN", "ABCDEFGHJKL!", "ABCDEF HJKLM", "ÀBCDEFGHJKLM", 123456789012],
)
def test_is_valid_format_rejects_other_shapes(token) -> None:
    assert is_valid_format(token) is False


def test_is_valid_format_does_not_touch_metrics() -> None:
    service = create_token_service()
    service.is_valid_format("bad")
    assert service.get_security_metrics().validation_failures == 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  abcdefgh2345  ", "ABCDEFGH2345"),
        ("abcdefgh2345", "ABCDEFGH2345"),
        ("  ab cd12 ef3 4gh  ", "ABCD12EF34GH"),
        ("ABCD\tEFGH\nJKLM", "ABCDEFGHJKLM"),
    ],
)
def test_sanitize_canonicalizes(raw, expected) -> None:
    assert create_token_service().sanitize_token(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", 42, "  ab cd12 ef3 4  ", "ABCD-EFGH-JKLM", "ABCDEFGHJKLMN", "ÀBCDEFGHJKLM"],
)
def test_sanitize_rejects_other_shapes(raw) -> None:
    assert TokenSanitizer().sanitize(raw) is None


def test_sanitize_is_idempotent() -> None:
    sanitizer = TokenSanitizer()
    once = sanitizer.sanitize(" wxyz 2345 abcd ")
    assert once == "WXYZ2345ABCD"
    assert sanitizer.sanitize(once) == once
