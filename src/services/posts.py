"""Post service: CRUD, pagination and ownership checks."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, joinedload

from src.exceptions import NotFoundError, UnauthorizedError, ValidationError
from src.models.post import Post
from src.schemas.pagination import PaginationMeta
from src.schemas.post import PostCreate, PostPage, PostUpdate, PostWithAuthorResponse

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


class PostService:
    """Service for post-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, owner_id: int, data: PostCreate) -> Post:
        """Create a post owned by ``owner_id``."""
        post = Post(title=data.title, user_id=owner_id)
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)

        logger.info(f"User {owner_id} created post {post.id}")
        return post

    def get_by_id(self, post_id: int) -> Post:
        """Get a live post with its author loaded."""
        post = (
            self.db.query(Post)
            .options(joinedload(Post.user))
            .filter(Post.id == post_id, Post.not_deleted())
            .first()
        )
        if post is None:
            raise NotFoundError(f"Post with ID {post_id} not found")
        return post

    def list_paginated(
        self, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE
    ) -> PostPage:
        """Get one page of all live posts, newest first."""
        return self._paginate(page, per_page)

    def list_paginated_for_owner(
        self, owner_id: int, page: int = DEFAULT_PAGE, per_page: int = DEFAULT_PER_PAGE
    ) -> PostPage:
        """Get one page of the live posts owned by ``owner_id``, newest first."""
        return self._paginate(page, per_page, Post.user_id == owner_id)

    def update(self, requester_id: int, post_id: int, data: PostUpdate) -> Post:
        """Change a post's title.

        Raises:
            NotFoundError: no live post with this id.
            UnauthorizedError: the post belongs to someone else.
        """
        post = self._get_owned(requester_id, post_id)

        self.db.query(Post).filter(Post.id == post_id, Post.user_id == requester_id).update(
            {Post.title: data.title, Post.updated_at: datetime.now(UTC)},
            synchronize_session=False,
        )
        self.db.commit()
        self.db.refresh(post)

        logger.info(f"User {requester_id} updated post {post_id}")
        return post

    def remove(self, requester_id: int, post_id: int) -> None:
        """Soft delete a post. Same checks as ``update``."""
        self._get_owned(requester_id, post_id)

        self.db.query(Post).filter(Post.id == post_id, Post.user_id == requester_id).update(
            {Post.deleted_at: datetime.now(UTC)},
            synchronize_session=False,
        )
        self.db.commit()

        logger.info(f"User {requester_id} deleted post {post_id}")

    def _get_owned(self, requester_id: int, post_id: int) -> Post:
        """Existence check first, then ownership, so each failure keeps its own error."""
        post = self.db.query(Post).filter(Post.id == post_id, Post.not_deleted()).first()
        if post is None:
            raise NotFoundError(f"Post with ID {post_id} not found")

        if post.user_id != requester_id:
            logger.warning(
                f"User {requester_id} tried to modify post {post_id} owned by {post.user_id}"
            )
            raise UnauthorizedError("Unauthorized action")

        return post

    def _paginate(self, page: int, per_page: int, *filters) -> PostPage:
        if page < 1:
            raise ValidationError("Page must be greater than 0")
        if per_page < 1:
            raise ValidationError("PerPage must be greater than 0")

        criteria = (Post.not_deleted(), *filters)
        skip = (page - 1) * per_page

        posts = (
            self.db.query(Post)
            .options(joinedload(Post.user))
            .filter(*criteria)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset(skip)
            .limit(per_page)
            .all()
        )
        # One Session runs one statement at a time, so rows and count are read back to back
        total = self.db.query(Post).filter(*criteria).count()

        return PostPage(
            data=[PostWithAuthorResponse.model_validate(post) for post in posts],
            pagination=PaginationMeta.build(page, per_page, total),
        )
