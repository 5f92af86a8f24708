"""Profile service layer: the profile aggregate and its mutation protocol."""

from typing import Callable, List
from uuid import UUID

import structlog

from core.exceptions import NoProfileError, ProfileNotFoundError
from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    ProfileFields,
    ProfileWithOwner,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_for_user(self, user_id: UUID) -> ProfileWithOwner:
        """Get the caller's own profile with owner display fields."""
        async with self._uow_factory() as uow:
            result = await uow.profiles.get_with_owner(user_id)
            if not result:
                raise NoProfileError(str(user_id))
            return result

    async def list_all(self) -> List[ProfileWithOwner]:
        """Get every profile with owner display fields, in store order."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_with_owners()  # type: ignore[no-any-return]

    async def get_by_user_id(self, raw_user_id: str) -> ProfileWithOwner:
        """Get a profile by account id.

        Malformed ids and unknown ids are reported the same way.
        """
        try:
            user_id = UUID(raw_user_id)
        except ValueError:
            raise ProfileNotFoundError(raw_user_id) from None

        async with self._uow_factory() as uow:
            result = await uow.profiles.get_with_owner(user_id)
            if not result:
                raise ProfileNotFoundError(raw_user_id)
            return result

    async def upsert(self, user_id: UUID, fields: ProfileFields) -> Profile:
        """Create the caller's profile, or replace its mutable fields if it exists."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)

            if profile:
                profile.apply(fields)
                updated = await uow.profiles.update(profile)
                await uow.commit()
                logger.info("profile_updated", user_id=str(user_id), profile_id=str(updated.id))
                return updated

            profile = Profile(user_id=user_id, status=fields.status)
            profile.apply(fields)
            created = await uow.profiles.create(profile)
            await uow.commit()
            logger.info("profile_created", user_id=str(user_id), profile_id=str(created.id))
            return created

    async def add_experience(self, user_id: UUID, entry: Experience) -> Profile:
        """Prepend an experience entry. The caller must already have a profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "experience_added",
                user_id=str(user_id),
                experience_id=str(updated.experience[0].id),
            )
            return updated

    async def remove_experience(self, user_id: UUID, experience_id: str) -> Profile:
        """Remove an experience entry. An unknown id leaves the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            removed = profile.remove_experience(experience_id)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "experience_removed" if removed else "experience_remove_noop",
                user_id=str(user_id),
                experience_id=experience_id,
            )
            return updated

    async def add_education(self, user_id: UUID, entry: Education) -> Profile:
        """Prepend an education entry. The caller must already have a profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(entry)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "education_added",
                user_id=str(user_id),
                education_id=str(updated.education[0].id),
            )
            return updated

    async def remove_education(self, user_id: UUID, education_id: str) -> Profile:
        """Remove an education entry. An unknown id leaves the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            removed = profile.remove_education(education_id)
            updated = await uow.profiles.update(profile)
            await uow.commit()
            logger.info(
                "education_removed" if removed else "education_remove_noop",
                user_id=str(user_id),
                education_id=education_id,
            )
            return updated

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the caller's posts, then profile, then account.

        Each step is committed before the next starts. A failure part-way
        leaves the earlier steps applied.
        """
        async with self._uow_factory() as uow:
            deleted_posts = await uow.posts.delete_all_for_user(user_id)
            await uow.commit()

            profile_deleted = await uow.profiles.delete_by_user(user_id)
            await uow.commit()

            account_deleted = await uow.accounts.delete(user_id)
            await uow.commit()

        logger.info(
            "account_deleted",
            user_id=str(user_id),
            deleted_posts=deleted_posts,
            profile_deleted=profile_deleted,
            account_deleted=account_deleted,
        )

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise NoProfileError(str(user_id))
        return profile
