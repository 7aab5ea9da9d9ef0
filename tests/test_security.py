"""Tests for password hashing and identity tokens."""

import asyncio
import base64
import time
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt
import pytest

from jobboard.core.exceptions import ValidationError
from jobboard.core.security import (
    PASSWORD_ALPHABET,
    TokenIssuer,
    generate_password,
    get_token_issuer,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-value-0123456789"


class TestPasswords:
    """Test password generation and hashing."""

    def test_generated_password_default_length(self):
        password = generate_password()

        assert len(password) == 9
        assert all(char in PASSWORD_ALPHABET for char in password)

    def test_generated_password_custom_length(self):
        assert len(generate_password(16)) == 16

    def test_generated_passwords_differ(self):
        assert len({generate_password() for _ in range(20)}) > 1

    @pytest.mark.asyncio
    async def test_hash_is_not_plaintext_and_verifies(self):
        hashed = await hash_password("s3cret")

        assert hashed != "s3cret"
        assert hashed.startswith("$2")
        assert await verify_password(hashed, "s3cret") is True

    @pytest.mark.asyncio
    async def test_wrong_password_does_not_verify(self):
        hashed = await hash_password("s3cret")

        assert await verify_password(hashed, "S3cret") is False

    @pytest.mark.asyncio
    async def test_hashes_are_salted(self):
        assert await hash_password("same") != await hash_password("same")

    @pytest.mark.asyncio
    async def test_hash_uses_configured_rounds(self):
        hashed = await hash_password("s3cret")

        assert hashed.split("$")[2] == "04"

    @pytest.mark.asyncio
    async def test_empty_password_cannot_be_hashed(self):
        with pytest.raises(ValidationError):
            await hash_password("")

    @pytest.mark.asyncio
    async def test_overlong_password_is_rejected(self):
        with pytest.raises(ValidationError):
            await hash_password("a" * 73)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "stored,password",
        [(None, "x"), ("", "x"), ("not-a-bcrypt-hash", "x")],
    )
    async def test_verify_handles_unusable_hash(self, stored, password):
        assert await verify_password(stored, password) is False

    @pytest.mark.asyncio
    async def test_verify_empty_password(self):
        assert await verify_password(await hash_password("s3cret"), "") is False

    @pytest.mark.asyncio
    async def test_hashing_does_not_block_event_loop(self):
        stored = bcrypt.hashpw(b"s3cret", bcrypt.gensalt(rounds=12)).decode()
        gaps = []
        done = asyncio.Event()

        async def ticker():
            last = time.perf_counter()
            while not done.is_set():
                await asyncio.sleep(0.005)
                now = time.perf_counter()
                gaps.append(now - last)
                last = now

        task = asyncio.create_task(ticker())
        try:
            assert await verify_password(stored, "s3cret") is True
        finally:
            done.set()
            await task

        assert len(gaps) > 5
        assert max(gaps) < 0.1


class TestTokenIssuer:
    """Test token issue and validation."""

    def test_round_trip_returns_public_id(self):
        issuer = TokenIssuer(SECRET, expire_minutes=5)

        token = issuer.issue_for_header("applicant-1")

        assert issuer.validate(token) == "applicant-1"

    def test_header_token_is_base64_jwt(self):
        issuer = TokenIssuer(SECRET, expire_minutes=5)

        raw = base64.b64decode(issuer.issue_for_header("applicant-1")).decode()
        claims = jwt.decode(raw, SECRET, algorithms=["HS256"])

        assert claims["sub"] == "applicant-1"
        assert claims["exp"] - claims["iat"] == 300

    def test_expired_token_is_rejected(self):
        issuer = TokenIssuer(SECRET, expire_minutes=1)
        issued = datetime.now(UTC) - timedelta(minutes=5)

        token = issuer.encode_for_header(issuer.issue("applicant-1", now=issued))

        assert issuer.validate(token) is None

    def test_token_signed_with_other_secret_is_rejected(self):
        other = TokenIssuer("a-different-secret-value-9876543210", expire_minutes=5)
        issuer = TokenIssuer(SECRET, expire_minutes=5)

        assert issuer.validate(other.issue_for_header("applicant-1")) is None

    def test_tampered_token_is_rejected(self):
        issuer = TokenIssuer(SECRET, expire_minutes=5)
        raw = issuer.issue("applicant-1")
        header, payload, signature = raw.split(".")
        forged_payload = base64.urlsafe_b64encode(b'{"sub":"applicant-2"}').rstrip(b"=")
        forged = ".".join([header, forged_payload.decode(), signature])

        assert issuer.validate(issuer.encode_for_header(forged)) is None

    @pytest.mark.parametrize("token", [None, "", "not base64!!", "bm90LWEtand0"])
    def test_malformed_token_is_rejected(self, token):
        issuer = TokenIssuer(SECRET, expire_minutes=5)

        assert issuer.validate(token) is None

    def test_token_without_subject_is_rejected(self):
        issuer = TokenIssuer(SECRET, expire_minutes=5)
        now = datetime.now(UTC)
        raw = jwt.encode(
            {"iat": now, "exp": now + timedelta(minutes=5)}, SECRET, algorithm="HS256"
        )

        assert issuer.validate(issuer.encode_for_header(raw)) is None

    def test_issue_requires_public_id(self):
        issuer = TokenIssuer(SECRET, expire_minutes=5)

        with pytest.raises(ValidationError):
            issuer.issue("")

    def test_get_token_issuer_uses_settings(self):
        from jobboard.core.config import settings

        issuer = get_token_issuer()

        assert issuer.secret == settings.token_secret
        assert issuer.expire_minutes == settings.token_expire_minutes
        assert issuer.algorithm == "HS256"
