"""Integration tests for the SQLAlchemy profile repository and unit of work."""

import pytest
from sqlalchemy import Text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import ProfileAlreadyExistsError
from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


def _profile(**overrides) -> Profile:
    fields = {"owner": OWNER, "username": "testuser", "skills": ["TypeScript", "Blockchain"]}
    fields.update(overrides)
    return Profile(**fields)


class TestSQLAlchemyProfileRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, session_factory: async_sessionmaker[AsyncSession]):
        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            await repo.create(_profile(location="New York"))
            await session.commit()

        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            stored = await repo.get(OWNER)

        assert stored is not None
        assert stored.username == "testuser"
        assert stored.skills == ["TypeScript", "Blockchain"]
        assert stored.location == "New York"
        assert stored.bio is None

    @pytest.mark.asyncio
    async def test_exists(self, session_factory: async_sessionmaker[AsyncSession]):
        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            assert not await repo.exists(OWNER)
            await repo.create(_profile())
            assert await repo.exists(OWNER)

    @pytest.mark.asyncio
    async def test_duplicate_owner_raises_already_exists(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with session_factory() as session:
            await SQLAlchemyProfileRepository(session).create(_profile())
            await session.commit()

        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            with pytest.raises(ProfileAlreadyExistsError):
                await repo.create(_profile(username="intruder"))
            await session.rollback()

    @pytest.mark.asyncio
    async def test_update_persists_details_only(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            await repo.create(_profile())
            await session.commit()

        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            profile = await repo.get(OWNER)
            assert profile is not None
            profile.username = "ignored"
            profile.replace_details(skills=["Python"], location="Berlin", bio=None)
            await repo.update(profile)
            await session.commit()

        async with session_factory() as session:
            stored = await SQLAlchemyProfileRepository(session).get(OWNER)

        assert stored is not None
        assert stored.username == "testuser"
        assert stored.skills == ["Python"]
        assert stored.location == "Berlin"

    def test_owner_column_is_unbounded(self):
        owner_type = ProfileModel.__table__.c.owner.type

        assert isinstance(owner_type, Text)
        assert owner_type.length is None

    @pytest.mark.asyncio
    async def test_long_owner_round_trips(self, session_factory: async_sessionmaker[AsyncSession]):
        owner = "https://idp.example.com/users/" + "x" * 400
        async with session_factory() as session:
            await SQLAlchemyProfileRepository(session).create(_profile(owner=owner))
            await session.commit()

        async with session_factory() as session:
            stored = await SQLAlchemyProfileRepository(session).get(owner)

        assert stored is not None
        assert stored.owner == owner

    @pytest.mark.asyncio
    async def test_delete(self, session_factory: async_sessionmaker[AsyncSession]):
        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            await repo.create(_profile())
            assert await repo.delete(OWNER) is True
            assert await repo.delete(OWNER) is False
            assert await repo.get(OWNER) is None


class TestSQLAlchemyUnitOfWork:
    @pytest.mark.asyncio
    async def test_uncommitted_work_is_discarded(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.profiles.create(_profile())

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.profiles.get(OWNER) is None

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, session_factory: async_sessionmaker[AsyncSession]):
        with pytest.raises(RuntimeError):
            async with SQLAlchemyUnitOfWork(session_factory) as uow:
                await uow.profiles.create(_profile())
                raise RuntimeError("boom")

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            assert await uow.profiles.get(OWNER) is None

    @pytest.mark.asyncio
    async def test_repository_requires_context(
        self, session_factory: async_sessionmaker[AsyncSession]
    ):
        uow = SQLAlchemyUnitOfWork(session_factory)

        with pytest.raises(RuntimeError):
            _ = uow.profiles
