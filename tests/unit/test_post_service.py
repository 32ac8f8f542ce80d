"""Unit tests for PostService."""

import uuid

import pytest

from blog_api.constants import PostStatus
from blog_api.models import Comment
from blog_api.utils.exceptions import (
    BlankFieldError,
    ForbiddenError,
    InvalidFieldError,
    InvalidIdentifierError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
)

pytestmark = pytest.mark.asyncio


class TestCreatePost:
    """Creating posts."""

    async def test_defaults_to_draft_and_sets_author(self, post_service, identity_for, test_user):
        post = await post_service.create_post(
            {"title": " Hello ", "content": " World "}, identity_for(test_user)
        )

        assert post.status is PostStatus.DRAFT
        assert post.author_id == test_user.id
        assert (post.title, post.content) == ("Hello", "World")

    async def test_requires_identity(self, post_service):
        with pytest.raises(UnauthorizedError):
            await post_service.create_post({"title": "a", "content": "b"}, None)

    async def test_rejects_unknown_status(self, post_service, identity_for, test_user):
        with pytest.raises(InvalidFieldError):
            await post_service.create_post(
                {"title": "a", "content": "b", "status": "hidden"}, identity_for(test_user)
            )

    async def test_category_must_exist(self, post_service, identity_for, test_user):
        with pytest.raises(NotFoundError) as exc_info:
            await post_service.create_post(
                {"title": "a", "content": "b", "category_id": 404}, identity_for(test_user)
            )
        assert exc_info.value.message == "Category not found"

    async def test_files_under_category(self, post_service, identity_for, test_user, make_category):
        category = await make_category()
        post = await post_service.create_post(
            {"title": "a", "content": "b", "category_id": str(category.id)}, identity_for(test_user)
        )
        assert post.category_id == category.id


class TestReadPosts:
    """Listing and fetching posts."""

    async def test_empty_list_is_not_found(self, post_service):
        with pytest.raises(NotFoundError) as exc_info:
            await post_service.list_posts()
        assert exc_info.value.message == "No posts found"

    async def test_list_posts(self, post_service, make_post, test_user):
        await make_post(test_user)
        await make_post(test_user)
        assert len(await post_service.list_posts()) == 2

    async def test_get_post_checks_id_shape(self, post_service):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            await post_service.get_post("123")
        assert exc_info.value.message == "Invalid post ID"

    async def test_get_missing_post(self, post_service):
        with pytest.raises(NotFoundError):
            await post_service.get_post(str(uuid.uuid4()))

    async def test_by_category(self, post_service, make_post, make_category, test_user):
        category = await make_category()
        filed = await make_post(test_user, category_id=category.id)
        await make_post(test_user)

        posts = await post_service.list_posts_by_category(str(category.id))
        assert [post.id for post in posts] == [filed.id]

    async def test_by_category_empty(self, post_service, make_category):
        category = await make_category()
        with pytest.raises(NotFoundError) as exc_info:
            await post_service.list_posts_by_category(category.id)
        assert exc_info.value.message == "No Posts found for specified category"

    async def test_by_category_bad_id(self, post_service):
        with pytest.raises(InvalidIdentifierError):
            await post_service.list_posts_by_category("tech")


class TestUpdatePost:
    """Author and admin updates, with check ordering."""

    async def test_author_updates(self, post_service, make_post, identity_for, test_user):
        post = await make_post(test_user)
        updated = await post_service.update_post(
            str(post.id), {"status": "published", "title": "New"}, identity_for(test_user)
        )
        assert updated.status is PostStatus.PUBLISHED
        assert updated.title == "New"
        assert updated.content == "Some content"

    async def test_admin_updates(self, post_service, make_post, identity_for, test_user, admin_user):
        post = await make_post(test_user)
        updated = await post_service.update_post(
            str(post.id), {"content": "moderated"}, identity_for(admin_user)
        )
        assert updated.content == "moderated"

    async def test_stranger_is_forbidden(
        self, post_service, make_post, identity_for, test_user, other_user
    ):
        post = await make_post(test_user)
        with pytest.raises(ForbiddenError) as exc_info:
            await post_service.update_post(str(post.id), {"title": "x"}, identity_for(other_user))
        assert exc_info.value.message == "You are not authorized to update this post"

    async def test_blank_title_names_field(self, post_service, make_post, identity_for, test_user):
        post = await make_post(test_user)
        with pytest.raises(BlankFieldError) as exc_info:
            await post_service.update_post(str(post.id), {"title": "  "}, identity_for(test_user))
        assert exc_info.value.message == "title cannot be blank"

    async def test_empty_update(self, post_service, make_post, identity_for, test_user):
        post = await make_post(test_user)
        with pytest.raises(InvalidInputError):
            await post_service.update_post(str(post.id), {}, identity_for(test_user))

    async def test_existence_precedes_validation(self, post_service, identity_for, test_user):
        with pytest.raises(NotFoundError):
            await post_service.update_post(str(uuid.uuid4()), {"title": " "}, identity_for(test_user))

    async def test_authorization_precedes_validation(
        self, post_service, make_post, identity_for, test_user, other_user
    ):
        post = await make_post(test_user)
        with pytest.raises(ForbiddenError):
            await post_service.update_post(str(post.id), {"title": " "}, identity_for(other_user))

    async def test_status_is_not_coerced(self, post_service, make_post, identity_for, test_user):
        post = await make_post(test_user)
        with pytest.raises(InvalidFieldError):
            await post_service.update_post(str(post.id), {"status": "PUBLISHED"}, identity_for(test_user))


class TestDeletePost:
    """Author and admin deletion."""

    async def test_missing_post(self, post_service, identity_for, test_user):
        with pytest.raises(NotFoundError) as exc_info:
            await post_service.delete_post(str(uuid.uuid4()), identity_for(test_user))
        assert exc_info.value.message == "Post not found"

    async def test_bad_id_checked_first(self, post_service):
        with pytest.raises(InvalidIdentifierError):
            await post_service.delete_post("nope", None)

    async def test_stranger_is_forbidden(
        self, post_service, make_post, identity_for, test_user, other_user
    ):
        post = await make_post(test_user)
        with pytest.raises(ForbiddenError):
            await post_service.delete_post(str(post.id), identity_for(other_user))

    async def test_delete_removes_comments(
        self, post_service, store, make_post, make_comment, identity_for, test_user, other_user
    ):
        post = await make_post(test_user)
        comment = await make_comment(post, other_user)

        await post_service.delete_post(str(post.id), identity_for(test_user))

        with pytest.raises(NotFoundError):
            await post_service.get_post(str(post.id))
        assert await store.find_by_id(Comment, comment.id) is None
