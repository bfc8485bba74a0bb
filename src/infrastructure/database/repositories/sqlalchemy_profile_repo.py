"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConcurrentModificationError, ProfileNotFoundError
from domain.entities.profile import Profile, ProfileView
from domain.entities.user import UserIdentity
from infrastructure.database.models import ProfileModel, UserModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_view_by_user(self, user_id: UUID) -> ProfileView | None:
        """Get a user's profile joined with the user's name and avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .where(ProfileModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        profile_model, user_model = row
        return self._to_view(profile_model, user_model)

    async def list_views(self) -> list[ProfileView]:
        """Get all profiles joined with their users' name and avatar."""
        stmt = (
            select(ProfileModel, UserModel)
            .join(UserModel, ProfileModel.user_id == UserModel.id)
            .order_by(ProfileModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_view(profile_model, user_model) for profile_model, user_model in result]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile.

        A unique violation on ``user_id`` means another request created the
        profile after this one looked it up.
        """
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise ConcurrentModificationError("profile", str(profile.user_id)) from exc
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ProfileNotFoundError(str(profile.user_id))

        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.status = profile.status
        model.skills = list(profile.skills)
        model.github_username = profile.github_username
        model.social = dict(profile.social)
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete a user's profile."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined, no-any-return]

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
            skills=list(model.skills or []),
            github_username=model.github_username,
            social=dict(model.social or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_view(self, profile_model: ProfileModel, user_model: UserModel) -> ProfileView:
        return ProfileView(
            profile=self._to_entity(profile_model),
            user=UserIdentity(
                id=user_model.id,
                name=user_model.name,
                avatar=user_model.avatar,
            ),
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
            skills=list(entity.skills),
            github_username=entity.github_username,
            social=dict(entity.social),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
