"""SQLAlchemy implementation of Account repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.account import Account
from infrastructure.database.models import AccountModel


class SQLAlchemyAccountRepository:
    """SQLAlchemy implementation of IAccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Account | None:
        """Get an account by ID."""
        stmt = select(AccountModel).where(AccountModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, account: Account) -> Account:
        """Create a new account."""
        model = AccountModel(
            id=account.id,
            email=account.email,
            name=account.name,
            avatar=account.avatar,
            created_at=account.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an account."""
        stmt = delete(AccountModel).where(AccountModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: AccountModel) -> Account:
        """Convert ORM model to domain entity."""
        return Account(
            id=model.id,
            email=model.email,
            name=model.name,
            avatar=model.avatar,
            created_at=model.created_at,
        )
