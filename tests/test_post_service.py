"""Tests for the post service against the test database."""

from unittest.mock import MagicMock

import pytest

from src.exceptions import NotFoundError, UnauthorizedError, ValidationError
from src.models.post import Post
from src.models.user import User
from src.schemas.pagination import PaginationMeta
from src.schemas.post import PostCreate, PostUpdate
from src.services.posts import PostService


@pytest.fixture
def owner(db):
    user = User(name="John", lastname="Doe", email="john@example.com", password_hash="x")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def stranger(db):
    user = User(name="Jane", lastname="Roe", email="jane@example.com", password_hash="x")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def service(db):
    return PostService(db)


class TestPaginationMeta:
    """Tests for page math."""

    def test_middle_page(self):
        meta = PaginationMeta.build(page=2, per_page=2, total=5)
        assert meta.total_pages == 3
        assert meta.has_next is True
        assert meta.has_previous is True

    def test_first_page_has_no_previous(self):
        assert PaginationMeta.build(page=1, per_page=10, total=50).has_previous is False
        assert PaginationMeta.build(page=1, per_page=10, total=0).has_previous is False

    def test_last_page_has_no_next(self):
        meta = PaginationMeta.build(page=3, per_page=2, total=5)
        assert meta.has_next is False

    def test_empty_result(self):
        meta = PaginationMeta.build(page=1, per_page=10, total=0)
        assert meta.total_pages == 0
        assert meta.has_next is False

    def test_serialized_with_camel_case(self):
        meta = PaginationMeta.build(page=1, per_page=10, total=1)
        assert set(meta.model_dump(by_alias=True)) == {
            "page",
            "perPage",
            "total",
            "totalPages",
            "hasNext",
            "hasPrevious",
        }


class TestPostService:
    """Tests for post CRUD and ownership checks."""

    def test_create_and_get(self, service, owner):
        created = service.create(owner.id, PostCreate(title="Hello world"))

        post = service.get_by_id(created.id)

        assert post.title == "Hello world"
        assert post.user_id == owner.id
        assert post.user.email == owner.email

    @pytest.mark.parametrize("page,per_page", [(0, 10), (-1, 10), (1, 0), (1, -5)])
    def test_invalid_page_fails_before_query(self, page, per_page):
        db = MagicMock()
        service = PostService(db)

        with pytest.raises(ValidationError):
            service.list_paginated(page, per_page)
        with pytest.raises(ValidationError):
            service.list_paginated_for_owner(1, page, per_page)

        db.query.assert_not_called()

    def test_list_paginated_window(self, service, owner):
        for i in range(5):
            service.create(owner.id, PostCreate(title=f"Post {i}"))

        result = service.list_paginated(page=2, per_page=2)

        assert [p.title for p in result.data] == ["Post 2", "Post 1"]
        assert result.pagination.total == 5
        assert result.pagination.total_pages == 3

    def test_list_paginated_defaults(self, service, owner):
        service.create(owner.id, PostCreate(title="Only post"))

        result = service.list_paginated()

        assert result.pagination.page == 1
        assert result.pagination.per_page == 10
        assert result.data[0].user.email == owner.email

    def test_list_for_owner(self, service, owner, stranger):
        service.create(owner.id, PostCreate(title="Owner post"))
        service.create(stranger.id, PostCreate(title="Stranger post"))

        result = service.list_paginated_for_owner(owner.id)

        assert [p.title for p in result.data] == ["Owner post"]
        assert result.pagination.total == 1

    def test_update(self, service, owner):
        post = service.create(owner.id, PostCreate(title="Before"))

        updated = service.update(owner.id, post.id, PostUpdate(title="After"))

        assert updated.title == "After"
        assert updated.updated_at is not None

    def test_update_checks_existence_before_ownership(self, service, owner, stranger):
        post = service.create(owner.id, PostCreate(title="Owned"))
        service.remove(owner.id, post.id)

        # Deleted post: stranger gets 404, not 401
        with pytest.raises(NotFoundError):
            service.update(stranger.id, post.id, PostUpdate(title="Nope"))
        with pytest.raises(NotFoundError):
            service.remove(stranger.id, post.id)

    def test_update_by_stranger(self, service, owner, stranger):
        post = service.create(owner.id, PostCreate(title="Owned"))

        with pytest.raises(UnauthorizedError) as exc_info:
            service.update(stranger.id, post.id, PostUpdate(title="Taken"))

        assert exc_info.value.detail == "Unauthorized action"
        assert service.get_by_id(post.id).title == "Owned"

    def test_remove_by_stranger(self, service, owner, stranger):
        post = service.create(owner.id, PostCreate(title="Owned"))

        with pytest.raises(UnauthorizedError):
            service.remove(stranger.id, post.id)

        assert service.get_by_id(post.id).deleted_at is None

    def test_remove_is_soft(self, db, service, owner):
        post = service.create(owner.id, PostCreate(title="Short lived"))
        post_id = post.id

        service.remove(owner.id, post_id)

        with pytest.raises(NotFoundError):
            service.get_by_id(post_id)
        assert service.list_paginated().pagination.total == 0
        assert service.list_paginated_for_owner(owner.id).data == []
        assert db.query(Post).filter(Post.id == post_id).one().is_deleted
