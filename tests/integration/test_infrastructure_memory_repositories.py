"""Integration tests for the in-memory user and session repositories.

Tests cover:
- Uniqueness enforcement on save and add_email
- Copy-on-read isolation
- Atomic token consumption (verify_email, set_reset_password)
- Session invalidation (single, bulk)
"""

import pytest

from accounts.domain.entities import EmailRecord, User
from accounts.domain.enums import TokenPurpose


def create_user(user_id: str = "u1", username: str = "ann", email: str = "ann@x.com") -> User:
    return User(id=user_id, username=username, emails=[EmailRecord(address=email)])


@pytest.mark.integration
class TestMemoryUserRepository:
    async def test_save_and_find(self, user_repo):
        await user_repo.save(create_user(), password_hash="hash")

        assert (await user_repo.find_by_id("u1")).username == "ann"
        assert (await user_repo.find_by_username("ann")).id == "u1"
        assert (await user_repo.find_by_email("ann@x.com")).id == "u1"
        assert await user_repo.find_password_hash("u1") == "hash"

    async def test_reads_return_copies(self, user_repo):
        await user_repo.save(create_user())

        found = await user_repo.find_by_id("u1")
        found.profile["name"] = "mutated"

        assert (await user_repo.find_by_id("u1")).profile == {}

    async def test_duplicate_username_rejected(self, user_repo):
        await user_repo.save(create_user())

        with pytest.raises(ValueError, match="Username"):
            await user_repo.save(create_user("u2", "ann", "other@x.com"))

    async def test_duplicate_email_rejected(self, user_repo):
        await user_repo.save(create_user())

        with pytest.raises(ValueError, match="Email"):
            await user_repo.save(create_user("u2", "bob", "ann@x.com"))

    async def test_add_email_owned_by_other_user_rejected(self, user_repo):
        await user_repo.save(create_user())
        await user_repo.save(create_user("u2", "bob", "bob@x.com"))

        with pytest.raises(ValueError):
            await user_repo.add_email("u2", "ann@x.com", False)

    async def test_unknown_user_write_raises(self, user_repo):
        with pytest.raises(KeyError):
            await user_repo.set_password("missing", "hash")

    async def test_verify_email_consumes_token(self, user_repo):
        await user_repo.save(create_user())
        await user_repo.add_email_verification_token("u1", "ann@x.com", "tok")

        assert (await user_repo.find_by_email_verification_token("tok")).id == "u1"

        assert await user_repo.verify_email("u1", "ann@x.com", "tok") is True

        user = await user_repo.find_by_id("u1")
        assert user.emails[0].verified is True
        assert await user_repo.find_by_email_verification_token("tok") is None

    async def test_set_reset_password_consumes_token(self, user_repo):
        await user_repo.save(create_user(), password_hash="old")
        await user_repo.add_reset_password_token(
            "u1", "ann@x.com", "tok", TokenPurpose.RESET_PASSWORD
        )

        assert await user_repo.set_reset_password("u1", "ann@x.com", "new", "tok") is True

        assert await user_repo.find_password_hash("u1") == "new"
        assert await user_repo.find_by_reset_password_token("tok") is None

    async def test_second_consumption_changes_nothing(self, user_repo):
        await user_repo.save(create_user(), password_hash="old")
        await user_repo.add_reset_password_token(
            "u1", "ann@x.com", "tok", TokenPurpose.RESET_PASSWORD
        )
        await user_repo.add_email_verification_token("u1", "ann@x.com", "vtok")
        await user_repo.set_reset_password("u1", "ann@x.com", "first", "tok")
        await user_repo.verify_email("u1", "ann@x.com", "vtok")

        assert await user_repo.set_reset_password("u1", "ann@x.com", "second", "tok") is False
        assert await user_repo.verify_email("u1", "ann@x.com", "vtok") is False
        assert await user_repo.find_password_hash("u1") == "first"

    async def test_verify_email_requires_matching_address(self, user_repo):
        await user_repo.save(create_user())
        await user_repo.add_email_verification_token("u1", "ann@x.com", "tok")

        assert await user_repo.verify_email("u1", "other@x.com", "tok") is False
        assert (await user_repo.find_by_id("u1")).emails[0].verified is False

    async def test_remove_tokens(self, user_repo):
        await user_repo.save(create_user())
        await user_repo.add_email_verification_token("u1", "ann@x.com", "v1")
        await user_repo.add_email_verification_token("u1", "ann@x.com", "v2")
        await user_repo.add_reset_password_token(
            "u1", "ann@x.com", "r1", TokenPurpose.ENROLL
        )

        await user_repo.remove_tokens("u1", ["v1", "r1"])

        user = await user_repo.find_by_id("u1")
        assert [t.token for t in user.verification_tokens] == ["v2"]
        assert user.reset_tokens == []

    async def test_remove_email(self, user_repo):
        await user_repo.save(create_user())

        await user_repo.remove_email("u1", "ANN@x.com")

        assert (await user_repo.find_by_id("u1")).emails == []


@pytest.mark.integration
class TestMemorySessionRepository:
    async def test_create_allocates_unique_valid_sessions(self, session_repo):
        first = await session_repo.create("u1", "10.0.0.1", "curl/8")
        second = await session_repo.create("u1", None, None)

        assert first != second
        session = await session_repo.find_by_id(first)
        assert session.valid is True
        assert session.ip_address == "10.0.0.1"

    async def test_update_records_client_metadata(self, session_repo):
        session_id = await session_repo.create("u1", None, None)

        await session_repo.update(session_id, "10.0.0.2", "firefox")

        session = await session_repo.find_by_id(session_id)
        assert session.user_agent == "firefox"
        assert session.updated_at is not None

    async def test_invalidate_is_idempotent(self, session_repo):
        session_id = await session_repo.create("u1", None, None)

        await session_repo.invalidate(session_id)
        await session_repo.invalidate(session_id)

        assert (await session_repo.find_by_id(session_id)).valid is False

    async def test_invalidate_all_for_user_only_touches_owner(self, session_repo):
        await session_repo.create("u1", None, None)
        await session_repo.create("u1", None, None)
        theirs = await session_repo.create("u2", None, None)

        await session_repo.invalidate_all_for_user("u1")

        assert all(not s.valid for s in await session_repo.list_for_user("u1"))
        assert (await session_repo.find_by_id(theirs)).valid is True

