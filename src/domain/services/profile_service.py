"""Profile service layer with business logic."""

from datetime import datetime
from typing import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AccountDeletionIncompleteError,
    ProfileNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from core.identifiers import parse_identifier
from domain.entities.account import AccountDeletionResult, AccountState
from domain.entities.profile import Profile, ProfileInput, ProfileView, parse_skills
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_own_profile(self, user_id: UUID) -> ProfileView:
        async with self._uow_factory() as uow:
            view = await uow.profiles.get_view_by_user(user_id)
            if not view:
                raise ProfileNotFoundError(str(user_id))
            return view  # type: ignore[no-any-return]

    async def get_profile_by_user_id(self, user_id: UUID | str) -> ProfileView:
        """Look up another user's profile; malformed ids are reported as not found."""
        parsed = parse_identifier(user_id)
        if parsed is None:
            raise ProfileNotFoundError(str(user_id))

        async with self._uow_factory() as uow:
            view = await uow.profiles.get_view_by_user(parsed)
            if not view:
                raise ProfileNotFoundError(str(user_id))
            return view  # type: ignore[no-any-return]

    async def list_profiles(self) -> list[ProfileView]:
        async with self._uow_factory() as uow:
            return await uow.profiles.list_views()  # type: ignore[no-any-return]

    async def upsert_profile(self, user_id: UUID, data: ProfileInput) -> Profile:
        """Create the user's profile, or update only the supplied fields.

        ``status`` and ``skills`` may be omitted on update but never supplied
        empty; creating a profile requires both.
        """
        _reject_empty_required(data)
        fields = data.supplied_fields()
        social = data.supplied_social()
        skills = parse_skills(data.skills) if data.skills else None

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)

            if profile:
                for name, value in fields.items():
                    setattr(profile, name, value)
                if skills is not None:
                    profile.skills = skills
                if social:
                    profile.social = {**profile.social, **social}
                profile.updated_at = datetime.utcnow()

                updated = await uow.profiles.update(profile)
                await uow.commit()
                logger.info("profile_updated", user_id=str(user_id), fields=sorted(fields))
                return updated  # type: ignore[no-any-return]

            if data.status is None:
                raise ValidationError("status", "Status is required")
            if skills is None:
                raise ValidationError("skills", "Skills is required")

            if not await uow.users.get(user_id):
                raise UserNotFoundError(str(user_id))

            fields.pop("status")
            profile = Profile(
                user_id=user_id,
                status=data.status,
                skills=skills,
                social=social,
                **fields,
            )
            created = await uow.profiles.create(profile)
            await uow.commit()
            logger.info("profile_created", user_id=str(user_id))
            return created  # type: ignore[no-any-return]

    async def get_account_state(self, user_id: UUID) -> AccountState:
        async with self._uow_factory() as uow:
            if not await uow.users.get(user_id):
                return AccountState.DELETED
            if not await uow.profiles.get_by_user(user_id):
                return AccountState.NO_PROFILE
            return AccountState.ACTIVE

    async def delete_account(self, user_id: UUID) -> AccountDeletionResult:
        """Delete the user's profile, then the user record.

        The two deletes are committed separately. If the second one fails the
        account is left in ``AccountState.NO_PROFILE`` and calling this again
        finishes the job. Posts written by the user are left in place.
        """
        async with self._uow_factory() as uow:
            if not await uow.users.get(user_id):
                raise UserNotFoundError(str(user_id))
            profile_deleted = await uow.profiles.delete_by_user(user_id)
            await uow.commit()

        logger.info(
            "account_deletion_step_completed",
            step="profile",
            user_id=str(user_id),
            profile_deleted=profile_deleted,
        )

        try:
            async with self._uow_factory() as uow:
                user_deleted = await uow.users.delete(user_id)
                await uow.commit()
        except Exception as exc:
            logger.exception(
                "account_deletion_incomplete",
                user_id=str(user_id),
                state=AccountState.NO_PROFILE.value,
            )
            raise AccountDeletionIncompleteError(
                str(user_id), AccountState.NO_PROFILE.value
            ) from exc

        logger.info(
            "account_deletion_step_completed",
            step="user",
            user_id=str(user_id),
            user_deleted=user_deleted,
        )
        return AccountDeletionResult(
            user_id=user_id,
            profile_deleted=profile_deleted,
            user_deleted=user_deleted,
        )


def _reject_empty_required(data: ProfileInput) -> None:
    if data.status is not None and not data.status.strip():
        raise ValidationError("status", "Status is required")
    if data.skills is not None and not parse_skills(data.skills):
        raise ValidationError("skills", "Skills is required")
