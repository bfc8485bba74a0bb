"""Read-only access to user display fields."""

from typing import Callable
from uuid import UUID

from core.exceptions import UserNotFoundError
from domain.entities.user import UserIdentity
from domain.repositories.unit_of_work import IUnitOfWork


class UserDirectory:
    """Resolves a user id to the name and avatar shown next to their content."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def resolve_identity(self, user_id: UUID) -> UserIdentity:
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise UserNotFoundError(str(user_id))
            return user.identity
