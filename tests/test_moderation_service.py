import pytest

from forum.models import Comment, Post, PostStatus
from forum.utils import moderation_service
from forum.utils.errors import ErrorKind, ForumError


def test_create_post_pending_for_members(db, make_user):
    member = make_user("member@forum.com")
    post = moderation_service.create_post(db, member.id, "Hello", "first post")
    assert post.status == PostStatus.PENDING
    assert post.creator.id == member.id
    assert post.created_at is not None


def test_create_post_approved_for_admins(db, make_user):
    admin = make_user("admin@forum.com", is_admin=True)
    post = moderation_service.create_post(db, admin.id, "Rules", None)
    assert post.status == PostStatus.APPROVED
    assert post.content is None


def test_create_post_unknown_user(db):
    with pytest.raises(ForumError) as excinfo:
        moderation_service.create_post(db, 999, "Hello")
    assert excinfo.value.kind == ErrorKind.NOT_FOUND
    assert db.query(Post).count() == 0


def test_list_public_only_approved_newest_first(db, make_user, make_post):
    author = make_user("author@forum.com")
    old = make_post(author, PostStatus.APPROVED, minutes=1)
    make_post(author, PostStatus.PENDING, minutes=2)
    make_post(author, PostStatus.REJECTED, minutes=3)
    new = make_post(author, PostStatus.APPROVED, minutes=4)

    posts = moderation_service.list_public(db)
    assert [p.id for p in posts] == [new.id, old.id]
    assert all(p.status == PostStatus.APPROVED for p in posts)


def test_list_for_owner_scopes_by_role(db, make_user, make_post):
    alice = make_user("alice@forum.com")
    bob = make_user("bob@forum.com")
    a1 = make_post(alice, PostStatus.PENDING, minutes=1)
    b1 = make_post(bob, PostStatus.APPROVED, minutes=2)
    a2 = make_post(alice, PostStatus.REJECTED, minutes=3)

    own = moderation_service.list_for_owner(db, alice.id, False)
    assert [p.id for p in own] == [a2.id, a1.id]

    everything = moderation_service.list_for_owner(db, alice.id, True)
    assert [p.id for p in everything] == [a2.id, b1.id, a1.id]


def test_list_for_owner_without_posts(db, make_user):
    loner = make_user("loner@forum.com")
    assert moderation_service.list_for_owner(db, loner.id, False) == []


def test_list_pending_scopes_by_role(db, make_user, make_post):
    alice = make_user("alice@forum.com")
    bob = make_user("bob@forum.com")
    a_pending = make_post(alice, PostStatus.PENDING, minutes=1)
    make_post(alice, PostStatus.APPROVED, minutes=2)
    b_pending = make_post(bob, PostStatus.PENDING, minutes=3)

    assert [p.id for p in moderation_service.list_pending(db, alice.id, False)] == [a_pending.id]
    assert [p.id for p in moderation_service.list_pending(db, alice.id, True)] == [b_pending.id, a_pending.id]


@pytest.mark.parametrize("new_status", list(PostStatus))
def test_set_status_overwrites_any_status(db, make_user, make_post, new_status):
    author = make_user("author@forum.com")
    post = make_post(author, PostStatus.REJECTED)

    moderation_service.set_status(db, post.id, new_status)
    db.expire_all()

    assert moderation_service.get_post(db, post.id).status == new_status


def test_set_status_rejects_unknown_value(db, make_user, make_post):
    author = make_user("author@forum.com")
    post = make_post(author)
    with pytest.raises(ValueError):
        moderation_service.set_status(db, post.id, "PUBLISHED")


def test_set_status_missing_post(db):
    with pytest.raises(ForumError) as excinfo:
        moderation_service.set_status(db, 42, PostStatus.APPROVED)
    assert excinfo.value.kind == ErrorKind.NOT_FOUND


def test_delete_post_removes_comments(db, make_user, make_post, make_comment):
    author = make_user("author@forum.com")
    post = make_post(author, PostStatus.APPROVED)
    other = make_post(author, PostStatus.APPROVED, minutes=1)
    make_comment(post, author, "one")
    make_comment(post, author, "two")
    make_comment(other, author, "keep")
    post_id = post.id

    assert moderation_service.delete_post(db, post_id) == 2

    assert db.query(Comment).count() == 1
    with pytest.raises(ForumError) as excinfo:
        moderation_service.get_post(db, post_id)
    assert excinfo.value.kind == ErrorKind.NOT_FOUND


def test_delete_post_missing(db):
    with pytest.raises(ForumError) as excinfo:
        moderation_service.delete_post(db, 7)
    assert excinfo.value.kind == ErrorKind.NOT_FOUND


def test_delete_post_rolls_back_on_failure(db, make_user, make_post, make_comment, monkeypatch):
    author = make_user("author@forum.com")
    post = make_post(author, PostStatus.APPROVED)
    make_comment(post, author, "one")
    make_comment(post, author, "two")
    post_id = post.id

    original_delete = db.delete

    def failing_delete(instance):
        if isinstance(instance, Post):
            raise RuntimeError("storage failure")
        original_delete(instance)

    monkeypatch.setattr(db, "delete", failing_delete)

    with pytest.raises(RuntimeError):
        moderation_service.delete_post(db, post_id)

    monkeypatch.undo()
    db.expire_all()
    assert db.query(Comment).filter(Comment.post_id == post_id).count() == 2
    assert moderation_service.get_post(db, post_id).id == post_id
