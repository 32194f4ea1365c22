"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PermissionDeniedError(DomainError):
    """Raised when a user lacks authorship or moderator rights for an action."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class LockedResourceError(DomainError):
    """Raised when writing to content that has been locked."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} is locked")


class ConflictError(DomainError):
    """Raised when a write would duplicate a unique value."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match a user."""

    pass


class StoreError(DomainError):
    """Raised when the backing store fails.

    Covers connection loss, timeouts and rejected statements alike; callers
    only learn that the operation did not complete.
    """

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Store operation '{operation}' failed: {detail}")
