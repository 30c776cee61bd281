"""Unit tests for EditCommentUseCase and DeleteCommentUseCase."""

import pytest

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentEditsRequest,
    ListCommentEditsUseCase,
)
from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.repository import (
    ModerationActionFilter,
    ModerationActionRepository,
    PostRepository,
)
from board.domain.value import (
    ActingCapacity,
    CommentState,
    ModerationActionType,
    Principal,
    Role,
    SortSpec,
)
from tests.conftest import make_principal, seed_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create_comment(env, author: Principal, body: str = "Original"):
    use_case = await env.get(CreateCommentUseCase)
    post = await seed_post(await env.get(PostRepository))
    return await use_case.execute(
        CreateCommentRequest(post_id=str(post.id), body=body, principal=author)
    )


class TestEditCommentUseCase:
    """Tests for EditCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_edit_records_no_action(self, unit_env):
        """An author's own edit should not be logged as moderation."""
        # Arrange
        author = make_principal()
        comment = await create_comment(unit_env, author)
        use_case = await unit_env.get(EditCommentUseCase)
        action_repo = await unit_env.get(ModerationActionRepository)

        # Act
        result = await use_case.execute(
            EditCommentRequest(
                comment_id=comment.comment_id, body="Fixed typo", principal=author
            )
        )

        # Assert
        assert result.body == "Fixed typo"
        assert result.is_edited is True
        assert await action_repo.count(ModerationActionFilter()) == 0

    @pytest.mark.asyncio
    async def test_moderator_edit_records_edit_action(self, unit_env):
        """A moderator editing someone else's comment should leave an audit trail."""
        # Arrange
        comment = await create_comment(unit_env, make_principal())
        moderator = make_principal(Role.MODERATOR)
        use_case = await unit_env.get(EditCommentUseCase)
        list_edits = await unit_env.get(ListCommentEditsUseCase)
        action_repo = await unit_env.get(ModerationActionRepository)

        # Act
        await use_case.execute(
            EditCommentRequest(
                comment_id=comment.comment_id, body="[redacted]", principal=moderator
            )
        )

        # Assert
        history = await list_edits.execute(
            ListCommentEditsRequest(comment_id=comment.comment_id, principal=moderator)
        )
        assert len(history.edits) == 1
        assert history.edits[0].editor_capacity is ActingCapacity.MODERATOR
        assert history.edits[0].previous_body == "Original"

        actions = await action_repo.find_all(
            ModerationActionFilter(actor_id=moderator.id),
            sort=SortSpec(),
        )
        assert len(actions) == 1
        assert actions[0].action_type is ModerationActionType.EDIT
        assert str(actions[0].target_comment_id) == comment.comment_id

    @pytest.mark.asyncio
    async def test_moderator_editing_own_comment_acts_as_author(self, unit_env):
        """Staff editing their own comment should not create a moderation action."""
        # Arrange
        moderator = make_principal(Role.MODERATOR)
        comment = await create_comment(unit_env, moderator)
        use_case = await unit_env.get(EditCommentUseCase)
        action_repo = await unit_env.get(ModerationActionRepository)

        # Act
        await use_case.execute(
            EditCommentRequest(
                comment_id=comment.comment_id, body="Edited", principal=moderator
            )
        )

        # Assert
        assert await action_repo.count(ModerationActionFilter()) == 0

    @pytest.mark.asyncio
    async def test_other_member_cannot_edit(self, unit_env):
        """A member editing someone else's comment should be refused."""
        # Arrange
        comment = await create_comment(unit_env, make_principal())
        use_case = await unit_env.get(EditCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                EditCommentRequest(
                    comment_id=comment.comment_id,
                    body="Mine now",
                    principal=make_principal(),
                )
            )

    @pytest.mark.asyncio
    async def test_failed_staff_edit_writes_nothing(self, unit_env):
        """A blank staff edit should leave neither an edit nor an action behind."""
        # Arrange
        comment = await create_comment(unit_env, make_principal())
        admin = make_principal(Role.ADMIN)
        use_case = await unit_env.get(EditCommentUseCase)
        action_repo = await unit_env.get(ModerationActionRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                EditCommentRequest(
                    comment_id=comment.comment_id, body="", principal=admin
                )
            )
        assert await action_repo.count(ModerationActionFilter()) == 0


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_delete_hides_comment_from_members(self, unit_env):
        """After deletion only staff should still see the comment."""
        # Arrange
        author = make_principal()
        comment = await create_comment(unit_env, author)
        delete = await unit_env.get(DeleteCommentUseCase)
        get = await unit_env.get(GetCommentUseCase)

        # Act
        await delete.execute(
            DeleteCommentRequest(comment_id=comment.comment_id, principal=author)
        )

        # Assert
        with pytest.raises(NotFoundError):
            await get.execute(GetCommentRequest(comment_id=comment.comment_id))
        staff_view = await get.execute(
            GetCommentRequest(
                comment_id=comment.comment_id, principal=make_principal(Role.ADMIN)
            )
        )
        assert staff_view.lifecycle_state is CommentState.SOFT_DELETED

    @pytest.mark.asyncio
    async def test_delete_twice_not_found(self, unit_env):
        """Deleting an already deleted comment should raise NotFoundError."""
        # Arrange
        author = make_principal()
        comment = await create_comment(unit_env, author)
        delete = await unit_env.get(DeleteCommentUseCase)
        request = DeleteCommentRequest(comment_id=comment.comment_id, principal=author)
        await delete.execute(request)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await delete.execute(request)

    @pytest.mark.asyncio
    async def test_admin_delete_records_delete_action(self, unit_env):
        """An admin removing a member's comment should log a delete action."""
        # Arrange
        comment = await create_comment(unit_env, make_principal())
        admin = make_principal(Role.ADMIN)
        delete = await unit_env.get(DeleteCommentUseCase)
        action_repo = await unit_env.get(ModerationActionRepository)

        # Act
        await delete.execute(
            DeleteCommentRequest(comment_id=comment.comment_id, principal=admin)
        )

        # Assert
        assert (
            await action_repo.count(
                ModerationActionFilter(
                    actor_id=admin.id, action_type=ModerationActionType.DELETE
                )
            )
            == 1
        )

    @pytest.mark.asyncio
    async def test_member_cannot_delete_others(self, unit_env):
        """A member deleting someone else's comment should be refused."""
        # Arrange
        comment = await create_comment(unit_env, make_principal())
        delete = await unit_env.get(DeleteCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteCommentRequest(
                    comment_id=comment.comment_id, principal=make_principal()
                )
            )
