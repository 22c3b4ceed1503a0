"""Tests for the authentication collaborator: tokens and principal extraction."""

import uuid

from auth import (
    create_access_token,
    decode_token,
    hash_password,
    principal_from_header,
    principal_from_token,
    verify_password,
)
from rbac import Principal, Role


class TestPasswords:
    def test_hash_and_verify(self) -> None:
        hashed = hash_password("s3cret!")
        assert verify_password("s3cret!", hashed)
        assert not verify_password("wrong", hashed)

    def test_long_password_truncated_consistently(self) -> None:
        long = "x" * 100
        assert verify_password(long, hash_password(long))


class TestTokens:
    def test_round_trip(self) -> None:
        token = create_access_token({"sub": "12", "role": "hod", "username": "hod.cs"})
        payload = decode_token(token)
        assert payload["sub"] == "12"
        assert payload["role"] == "hod"
        assert "exp" in payload

    def test_principal_from_token(self) -> None:
        token = create_access_token({"sub": "12", "role": "hod", "username": "hod.cs"})
        assert principal_from_token(token) == Principal(id="12", role="hod", username="hod.cs")

    def test_token_without_role(self) -> None:
        token = create_access_token({"sub": "12"})
        assert principal_from_token(token) is None

    def test_tampered_token(self) -> None:
        token = create_access_token({"sub": "12", "role": "faculty"})
        forged = create_access_token({"sub": "12", "role": "admin"})
        header, _, signature = token.split(".")
        assert decode_token(".".join([header, forged.split(".")[1], signature])) is None


class TestHeader:
    def test_bearer(self) -> None:
        token = create_access_token({"sub": "3", "role": "dean"})
        principal = principal_from_header(f"Bearer {token}")
        assert principal is not None
        assert principal.role == "dean"

    def test_scheme_case_insensitive(self) -> None:
        token = create_access_token({"sub": "3", "role": "dean"})
        assert principal_from_header(f"bearer {token}") is not None

    def test_missing_or_malformed(self) -> None:
        assert principal_from_header(None) is None
        assert principal_from_header("") is None
        assert principal_from_header("Basic dXNlcjpwYXNz") is None
        assert principal_from_header("Bearer ") is None


class TestPrincipal:
    def test_int_id_normalized(self) -> None:
        assert Principal(id=42, role="faculty").id == "42"

    def test_uuid_id_normalized(self) -> None:
        uid = uuid.uuid4()
        assert Principal(id=uid, role="faculty").id == str(uid)

    def test_enum_role_normalized(self) -> None:
        assert Principal(id="1", role=Role.oric).role == "oric"

    def test_unknown_role_accepted(self) -> None:
        assert Principal(id="1", role="visitor").role == "visitor"
