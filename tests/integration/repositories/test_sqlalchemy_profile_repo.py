"""Integration tests for the SQLAlchemy profile repository."""

from datetime import date
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateProfileError
from domain.entities.profile import Education, Experience, Profile
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import AccountModel
from infrastructure.database.repositories.sqlalchemy_account_repo import SQLAlchemyAccountRepository
from infrastructure.database.repositories.sqlalchemy_profile_repo import (
    SQLAlchemyProfileRepository,
)


@pytest.fixture
def repo(db_session: AsyncSession) -> SQLAlchemyProfileRepository:
    return SQLAlchemyProfileRepository(db_session)


class TestCreate:
    @pytest.mark.asyncio
    async def test_assigns_entry_ids(
        self,
        repo: SQLAlchemyProfileRepository,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        profile = Profile(
            user_id=test_user.id,
            status="Developer",
            experience=[Experience(title="Eng", company="Acme", from_date=date(2020, 1, 1))],
            education=[
                Education(
                    school="MIT", degree="BSc", field_of_study="CS", from_date=date(2015, 9, 1)
                )
            ],
        )

        created = await repo.create(profile)

        assert isinstance(created.experience[0].id, UUID)
        assert isinstance(created.education[0].id, UUID)
        assert created.experience[0].from_date == date(2020, 1, 1)

    @pytest.mark.asyncio
    async def test_rejects_second_profile_for_account(
        self,
        repo: SQLAlchemyProfileRepository,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        await repo.create(Profile(user_id=test_user.id, status="Developer"))

        with pytest.raises(DuplicateProfileError):
            await repo.create(Profile(user_id=test_user.id, status="Other"))


class TestUpdate:
    @pytest.mark.asyncio
    async def test_persists_sub_collections_in_order(
        self,
        repo: SQLAlchemyProfileRepository,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        profile = await repo.create(Profile(user_id=test_user.id, status="Developer"))
        profile.add_experience(Experience(title="A", company="X", from_date=date(2018, 1, 1)))
        profile.add_experience(
            Experience(
                title="B",
                company="Y",
                from_date=date(2020, 1, 1),
                to_date=date(2021, 1, 1),
            )
        )

        await repo.update(profile)
        stored = await repo.get_by_user(test_user.id)

        assert stored is not None
        assert [e.title for e in stored.experience] == ["B", "A"]
        assert stored.experience[0].to_date == date(2021, 1, 1)
        assert stored.experience[1].to_date is None
        assert all(e.id is not None for e in stored.experience)

    @pytest.mark.asyncio
    async def test_keeps_existing_entry_ids(
        self,
        repo: SQLAlchemyProfileRepository,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        profile = await repo.create(
            Profile(
                user_id=test_user.id,
                status="Developer",
                experience=[Experience(title="A", company="X", from_date=date(2018, 1, 1))],
            )
        )
        original_id = profile.experience[0].id

        profile.status = "Lead"
        updated = await repo.update(profile)

        assert updated.status == "Lead"
        assert updated.experience[0].id == original_id


class TestOwnerReads:
    @pytest.mark.asyncio
    async def test_get_with_owner(
        self,
        repo: SQLAlchemyProfileRepository,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        await repo.create(Profile(user_id=test_user.id, status="Developer"))

        result = await repo.get_with_owner(test_user.id)

        assert result is not None
        assert result.owner is not None
        assert result.owner.name == "Test User"
        assert result.owner.avatar == "https://gravatar.com/avatar/test"

    @pytest.mark.asyncio
    async def test_delete_by_user(
        self,
        repo: SQLAlchemyProfileRepository,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        await repo.create(Profile(user_id=test_user.id, status="Developer"))

        assert await repo.delete_by_user(test_user.id) is True
        assert await repo.get_by_user(test_user.id) is None
        assert await repo.delete_by_user(test_user.id) is False


class TestForeignKeys:
    @pytest.mark.asyncio
    async def test_create_without_account_is_a_store_error_not_a_duplicate(
        self, repo: SQLAlchemyProfileRepository
    ) -> None:
        with pytest.raises(IntegrityError) as exc_info:
            await repo.create(Profile(user_id=uuid4(), status="Developer"))

        assert "foreign key" in str(exc_info.value.orig).lower()

    @pytest.mark.asyncio
    async def test_account_cannot_be_deleted_before_its_profile(
        self,
        repo: SQLAlchemyProfileRepository,
        db_session: AsyncSession,
        test_account: AccountModel,
        test_user: TokenUser,
    ) -> None:
        await repo.create(Profile(user_id=test_user.id, status="Developer"))

        with pytest.raises(IntegrityError):
            await SQLAlchemyAccountRepository(db_session).delete(test_user.id)
