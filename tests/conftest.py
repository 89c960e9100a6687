import os

# Configure an in-memory database before the application modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from forum.database import SessionLocal, create_tables, drop_tables
from forum.main import app
from forum.models import Comment, Post, PostStatus, User
from forum.utils.auth import hash_password

PASSWORD = "Abcde1"
BASE_TIME = datetime(2022, 11, 14, 5, 15, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def schema():
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make_user(email, is_admin=False):
        user = User(email=email, hashed_password=hash_password(PASSWORD), is_admin=is_admin)
        db.add(user)
        db.commit()
        return user

    return _make_user


@pytest.fixture
def make_post(db):
    """Insert a post directly, minutes after BASE_TIME"""
    def _make_post(creator, status=PostStatus.PENDING, minutes=0, title=None):
        post = Post(
            title=title or f"post at +{minutes}m",
            content="body",
            status=status,
            creator=creator,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        db.add(post)
        db.commit()
        return post

    return _make_post


@pytest.fixture
def make_comment(db):
    def _make_comment(post, creator, text="nice", minutes=0):
        comment = Comment(
            post=post,
            creator=creator,
            comment=text,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        db.add(comment)
        db.commit()
        return comment

    return _make_comment
