"""Domain layer errors.

Every failure a caller can act on is a subclass of ``DomainError``. The
interface layer maps each class to one HTTP status code.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input: empty body, bad enum value, inconsistent targets."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is missing or soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a principal lacks the role or ownership an operation needs."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NestingLimitExceededError(DomainError):
    """Raised when a reply would be nested deeper than the configured limit."""

    def __init__(self, parent_id: str, depth: int, max_depth: int):
        self.parent_id = parent_id
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Reply to comment {parent_id} would have nesting level {depth}, "
            f"maximum is {max_depth}"
        )


class ConflictError(DomainError):
    """Raised when a write collides with existing state (e.g. duplicates)."""

    pass


class InvalidStateTransitionError(ConflictError):
    """Raised on an illegal lifecycle move, such as re-resolving a report."""

    def __init__(self, resource: str, resource_id: str, current: str, target: str):
        self.resource = resource
        self.resource_id = resource_id
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move {resource} {resource_id} from '{current}' to '{target}'"
        )
