"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A precondition failed before anything was persisted."""

    pass


class DuplicateActionError(DomainError):
    """A uniqueness rule was violated (duplicate entry, request, ...)."""

    pass


class PersistenceError(DomainError):
    """A collaborator reported an error.

    The message is the collaborator's own text and is shown to the user
    as-is (after friendly rewriting in the interface layer).
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthenticationError(DomainError):
    """Sign-in, sign-up or session verification failed."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    def __init__(self, action: str, user_id: str):
        self.action = action
        self.user_id = user_id
        super().__init__(f"User {user_id} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")
