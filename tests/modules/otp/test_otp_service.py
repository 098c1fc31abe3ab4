"""
Unit tests for OTP issuing and verification.

The repository is replaced by an in-memory store so attempts and
verification flags behave like persisted rows.
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest

from app.modules.otp import service
from app.modules.otp.models import OtpVerification

PHONE = "0712345678"


class InMemoryOtpRepository:
    """Stand-in for app.modules.otp.repository holding rows in a list."""

    def __init__(self):
        self.rows: list[OtpVerification] = []

    async def replace_for_phone(self, db, phone_number, otp_hash, expires_at):
        self.rows = [r for r in self.rows if r.phone_number != phone_number]
        otp = OtpVerification(
            id=len(self.rows) + 1,
            phone_number=phone_number,
            otp_hash=otp_hash,
            expires_at=expires_at,
            verified=False,
            attempts=0,
        )
        self.rows.append(otp)
        return otp

    async def get_latest_unverified(self, db, phone_number):
        pending = [r for r in self.rows if r.phone_number == phone_number and not r.verified]
        return pending[-1] if pending else None

    async def increment_attempts(self, db, otp):
        otp.attempts += 1
        return otp

    async def mark_verified(self, db, otp):
        otp.verified = True
        return otp

    async def delete_expired(self, db, now=None):
        cutoff = now or datetime.now(UTC)
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.expires_at >= cutoff]
        return before - len(self.rows)


@pytest.fixture
def otp_repo():
    repo = InMemoryOtpRepository()
    with patch.object(service, "repository", repo):
        yield repo


@pytest.fixture
def stored_code(otp_repo):
    """Store a known code for PHONE and return it."""

    async def _store(code="123456", expires_in=timedelta(minutes=5)):
        await otp_repo.replace_for_phone(
            None, PHONE, service._hash_code(code), datetime.now(UTC) + expires_in
        )
        return code

    return _store


class TestGenerateCode:
    def test_six_digits(self):
        for _ in range(50):
            code = service.generate_code()
            assert len(code) == 6
            assert 100000 <= int(code) <= 999999


class TestIssueOtp:
    @pytest.mark.asyncio
    async def test_stores_hash_and_sends_code(self, mock_db, otp_repo):
        with patch("app.modules.otp.service.send_sms", new=AsyncMock(return_value=True)) as mock_sms:
            await service.issue_otp(mock_db, PHONE)

        assert len(otp_repo.rows) == 1
        row = otp_repo.rows[0]
        message = mock_sms.call_args.args[1]
        code = message.split("code is: ")[1][:6]

        assert row.otp_hash == service._hash_code(code)
        assert code not in row.otp_hash
        assert row.expires_at > datetime.now(UTC)

    @pytest.mark.asyncio
    async def test_new_code_replaces_previous(self, mock_db, otp_repo):
        with patch("app.modules.otp.service.send_sms", new=AsyncMock(return_value=True)):
            await service.issue_otp(mock_db, PHONE)
            await service.issue_otp(mock_db, PHONE)

        assert len(otp_repo.rows) == 1

    @pytest.mark.asyncio
    async def test_sms_failure_keeps_code(self, mock_db, otp_repo):
        with patch("app.modules.otp.service.send_sms", new=AsyncMock(return_value=False)):
            await service.issue_otp(mock_db, PHONE)

        assert len(otp_repo.rows) == 1


class TestVerifyOtp:
    @pytest.mark.asyncio
    async def test_correct_code(self, mock_db, otp_repo, stored_code):
        code = await stored_code()

        assert await service.verify_otp(mock_db, PHONE, code) is True
        assert otp_repo.rows[0].verified is True

    @pytest.mark.asyncio
    async def test_code_cannot_be_used_twice(self, mock_db, stored_code):
        code = await stored_code()

        assert await service.verify_otp(mock_db, PHONE, code) is True
        assert await service.verify_otp(mock_db, PHONE, code) is False

    @pytest.mark.asyncio
    async def test_wrong_code_counts_attempt(self, mock_db, otp_repo, stored_code):
        await stored_code("123456")

        assert await service.verify_otp(mock_db, PHONE, "654321") is False
        assert otp_repo.rows[0].attempts == 1
        assert otp_repo.rows[0].verified is False

    @pytest.mark.asyncio
    async def test_locked_after_max_attempts(self, mock_db, stored_code):
        code = await stored_code("123456")

        for _ in range(3):
            assert await service.verify_otp(mock_db, PHONE, "000000") is False

        assert await service.verify_otp(mock_db, PHONE, code) is False

    @pytest.mark.asyncio
    async def test_expired_code(self, mock_db, stored_code):
        code = await stored_code(expires_in=timedelta(seconds=-1))

        assert await service.verify_otp(mock_db, PHONE, code) is False

    @pytest.mark.asyncio
    async def test_no_code_issued(self, mock_db, otp_repo):
        assert await service.verify_otp(mock_db, PHONE, "123456") is False

    @pytest.mark.asyncio
    async def test_naive_expiry_is_treated_as_utc(self, mock_db, otp_repo, stored_code):
        code = await stored_code()
        otp_repo.rows[0].expires_at = (datetime.now(UTC) + timedelta(minutes=5)).replace(tzinfo=None)

        assert await service.verify_otp(mock_db, PHONE, code) is True


@pytest.mark.asyncio
async def test_cleanup_removes_expired(mock_db, otp_repo, stored_code):
    await stored_code(expires_in=timedelta(minutes=-10))

    assert await service.cleanup_expired(mock_db) == 1
    assert otp_repo.rows == []
