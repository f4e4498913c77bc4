"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for input that is rejected before reaching persistence, such as
    empty comment content or a reply to a reply.
    """

    pass


class SelfVoteError(ValidationError, PermissionError):
    """Raised when a user attempts to vote on their own comment."""

    def __init__(self, comment_id: str, user_id: str):
        self.comment_id = comment_id
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot vote on their own comment {comment_id}")


class AuthenticationRequiredError(DomainError):
    """Raised when an action needs a signed-in user and there is none."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotificationDispatchError(DomainError):
    """Raised when one or more notification emails could not be delivered."""

    pass
