"""Integration tests for the JWT token codec.

Architecture:
- Tests against the real PyJWT library (no mocking)
- Verifies Result type error handling
- Tests security properties (uniqueness, expiration, tampering)
"""

from datetime import timedelta

import jwt
import pytest
from freezegun import freeze_time

from accounts.core.result import Failure, Success
from accounts.domain.errors import AuthenticationError
from accounts.infrastructure.security.jwt_service import JWTService

SECRET = "x" * 32


@pytest.mark.integration
class TestJWTServiceIssue:
    def test_access_token_carries_session_id(self):
        service = JWTService(secret_key=SECRET)

        result = service.verify(service.issue_access_token("s1"))

        assert isinstance(result, Success)
        assert result.value["data"] == {"session_id": "s1"}
        assert {"iat", "exp", "jti"} <= result.value.keys()

    def test_refresh_token_has_no_data_claim(self):
        service = JWTService(secret_key=SECRET)

        result = service.verify(service.issue_refresh_token())

        assert isinstance(result, Success)
        assert "data" not in result.value

    def test_lifetimes_follow_configuration(self):
        service = JWTService(
            secret_key=SECRET, access_token_expire_minutes=90, refresh_token_expire_days=1
        )
        pair = service.create_tokens("s1")

        access = jwt.decode(pair.access_token, SECRET, algorithms=["HS256"])
        refresh = jwt.decode(pair.refresh_token, SECRET, algorithms=["HS256"])

        assert access["exp"] - access["iat"] == 90 * 60
        assert refresh["exp"] - refresh["iat"] == 24 * 3600

    def test_tokens_are_unique_within_same_second(self):
        service = JWTService(secret_key=SECRET)

        with freeze_time("2024-01-01 12:00:00"):
            first = service.issue_access_token("s1")
            second = service.issue_access_token("s1")

        assert first != second

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="short")


@pytest.mark.integration
class TestJWTServiceVerify:
    def test_wrong_secret_is_invalid(self):
        token = JWTService(secret_key=SECRET).issue_access_token("s1")

        result = JWTService(secret_key="y" * 32).verify(token)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.INVALID_TOKEN

    def test_malformed_token(self):
        result = JWTService(secret_key=SECRET).verify("not.a.jwt")

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.MALFORMED_TOKEN

    def test_tampered_payload_is_rejected(self):
        service = JWTService(secret_key=SECRET)
        header, _, signature = service.issue_access_token("s1").split(".")
        forged_payload = jwt.encode(
            {"data": {"session_id": "other"}, "exp": 9999999999}, "z" * 32
        ).split(".")[1]

        result = service.verify(f"{header}.{forged_payload}.{signature}")

        assert isinstance(result, Failure)

    def test_expired_token_fails(self):
        service = JWTService(secret_key=SECRET, access_token_expire_minutes=90)

        with freeze_time("2024-01-01 12:00:00") as frozen:
            token = service.issue_access_token("s1")
            frozen.tick(timedelta(minutes=91))
            result = service.verify(token)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.EXPIRED_TOKEN

    def test_expired_token_accepted_when_expiry_ignored(self):
        service = JWTService(secret_key=SECRET, access_token_expire_minutes=90)

        with freeze_time("2024-01-01 12:00:00") as frozen:
            token = service.issue_access_token("s1")
            frozen.tick(timedelta(minutes=91))
            result = service.verify(token, ignore_expiration=True)

        assert isinstance(result, Success)
        assert result.value["data"]["session_id"] == "s1"

    def test_token_without_exp_is_rejected(self):
        token = jwt.encode({"data": {"session_id": "s1"}}, SECRET, algorithm="HS256")

        result = JWTService(secret_key=SECRET).verify(token)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.INVALID_TOKEN
