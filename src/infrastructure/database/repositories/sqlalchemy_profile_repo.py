"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateProfileError
from domain.entities.profile import (
    Education,
    Experience,
    OwnerSummary,
    Profile,
    ProfileWithOwner,
)
from infrastructure.database.models import AccountModel, ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by an account."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_with_owner(self, user_id: UUID) -> ProfileWithOwner | None:
        """Get the profile owned by an account, with the owner's display fields."""
        stmt = (
            select(ProfileModel, AccountModel)
            .outerjoin(AccountModel, ProfileModel.user_id == AccountModel.id)
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if not row:
            return None
        return self._to_profile_with_owner(row[0], row[1])

    async def list_with_owners(self) -> list[ProfileWithOwner]:
        """Get every profile with its owner's display fields."""
        stmt = select(ProfileModel, AccountModel).outerjoin(
            AccountModel, ProfileModel.user_id == AccountModel.id
        )
        result = await self._session.execute(stmt)
        return [self._to_profile_with_owner(model, owner) for model, owner in result]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile, enforcing one profile per account."""
        existing = await self._session.execute(
            select(ProfileModel.id).where(ProfileModel.user_id == profile.user_id)
        )
        if existing.scalar_one_or_none():
            raise DuplicateProfileError(str(profile.user_id))

        self._assign_entry_ids(profile)
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Only a unique violation on user_id means a concurrent create won.
            # FK and NOT NULL violations surface as store failures.
            orig = str(exc.orig).lower() if exc.orig else ""
            if "unique" in orig or "duplicate" in orig:
                raise DuplicateProfileError(str(profile.user_id)) from exc
            raise
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Persist the whole aggregate."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        self._assign_entry_ids(profile)
        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.status = profile.status
        model.github_username = profile.github_username
        model.skills = list(profile.skills)
        model.social = dict(profile.social)
        model.experience = [_experience_to_doc(e) for e in profile.experience]
        model.education = [_education_to_doc(e) for e in profile.education]

        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by an account."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    @staticmethod
    def _assign_entry_ids(profile: Profile) -> None:
        """Give every sub-entry without an identifier a fresh one."""
        for entry in [*profile.experience, *profile.education]:
            if entry.id is None:
                entry.id = uuid4()

    def _to_profile_with_owner(
        self, model: ProfileModel, owner: AccountModel | None
    ) -> ProfileWithOwner:
        return ProfileWithOwner(
            profile=self._to_entity(model),
            owner=(
                OwnerSummary(id=owner.id, name=owner.name, avatar=owner.avatar)
                if owner
                else None
            ),
        )

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            status=model.status,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[_experience_from_doc(doc) for doc in model.experience or []],
            education=[_education_from_doc(doc) for doc in model.education or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            bio=entity.bio,
            status=entity.status,
            github_username=entity.github_username,
            skills=list(entity.skills),
            social=dict(entity.social),
            experience=[_experience_to_doc(e) for e in entity.experience],
            education=[_education_to_doc(e) for e in entity.education],
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


def _date_to_doc(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _date_from_doc(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _experience_to_doc(entry: Experience) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "title": entry.title,
        "company": entry.company,
        "location": entry.location,
        "from": _date_to_doc(entry.from_date),
        "to": _date_to_doc(entry.to_date),
        "current": entry.current,
        "description": entry.description,
    }


def _experience_from_doc(doc: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(doc["id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc.get("location"),
        from_date=date.fromisoformat(doc["from"]),
        to_date=_date_from_doc(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def _education_to_doc(entry: Education) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "school": entry.school,
        "degree": entry.degree,
        "field_of_study": entry.field_of_study,
        "from": _date_to_doc(entry.from_date),
        "to": _date_to_doc(entry.to_date),
        "current": entry.current,
        "description": entry.description,
    }


def _education_from_doc(doc: dict[str, Any]) -> Education:
    return Education(
        id=UUID(doc["id"]),
        school=doc["school"],
        degree=doc["degree"],
        field_of_study=doc["field_of_study"],
        from_date=date.fromisoformat(doc["from"]),
        to_date=_date_from_doc(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )
