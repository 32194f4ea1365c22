"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from forum.application.usecase.thread import (
    AddCommentUseCase,
    CreateThreadUseCase,
    DeleteThreadUseCase,
    EditThreadUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    LockThreadUseCase,
    ToggleAnsweredUseCase,
)
from forum.application.usecase.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)
from forum.domain.service import JWTService, ThreadService, UserService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, thread_service: ThreadService
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_thread_use_case(
        self, thread_service: ThreadService
    ) -> EditThreadUseCase:
        """Provide edit thread use case."""
        return EditThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_lock_thread_use_case(
        self, thread_service: ThreadService
    ) -> LockThreadUseCase:
        """Provide lock thread use case."""
        return LockThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, thread_service: ThreadService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_answered_use_case(
        self, thread_service: ThreadService
    ) -> ToggleAnsweredUseCase:
        """Provide toggle answered use case."""
        return ToggleAnsweredUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_thread_use_case(
        self, thread_service: ThreadService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(thread_service=thread_service)
