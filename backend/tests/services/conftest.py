"""Service test fixtures - async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - app.state.db_manager points at the test engine for the readiness probe

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows committed by the client are visible to test_db
"""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from forum.db.base import Base
from forum.infrastructure.database import DatabaseSessionManager, get_db
from forum.main import app
from forum.models import Comment, Post, Vote
from tests.services.factories import make_user


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.db_manager


@pytest.fixture
async def seed_user(test_db):
    return await make_user(test_db, "alice", "a@x.com")


@pytest.fixture
async def seed_posts(test_db):
    """Three posts at increasing timestamps, with votes and a comment thread."""
    author = await make_user(test_db, "author", "author@x.com")
    voter = await make_user(test_db, "voter", "voter@x.com")
    posts = []
    for day, title in ((1, "oldest"), (2, "middle"), (3, "newest")):
        post = Post(
            member_id=author.member.id, post_type="text",
            title=title, content=f"{title} content",
            date_created=datetime(2024, 1, day, tzinfo=timezone.utc),
        )
        test_db.add(post)
        posts.append(post)
    await test_db.flush()

    middle = posts[1]
    test_db.add_all([
        Vote(post_id=middle.id, member_id=voter.member.id, vote_type="Upvote"),
        Vote(post_id=middle.id, member_id=author.member.id, vote_type="Downvote"),
    ])
    root = Comment(
        post_id=middle.id, member_id=voter.member.id, text="first!",
        date_created=datetime(2024, 1, 2, 12, tzinfo=timezone.utc),
    )
    test_db.add(root)
    await test_db.flush()
    test_db.add(Comment(
        post_id=middle.id, member_id=author.member.id, text="reply",
        parent_comment_id=root.id,
        date_created=datetime(2024, 1, 2, 13, tzinfo=timezone.utc),
    ))
    await test_db.commit()
    return posts
