class DomainError(Exception):
    """Base for every error a service raises on purpose.

    Controllers turn these into JSON responses; anything else is a bug.
    """


class ValidationError(DomainError):
    """Missing or malformed identity/date, or a blank required field."""


class AuthenticationError(DomainError):
    """Unknown user, wrong password or wrong admin password."""


class AuthorizationError(DomainError):
    """Caller is logged in but may not perform the action."""


class NotFoundError(DomainError):
    """An explicitly addressed user or project does not exist."""


class PersistenceError(DomainError):
    """The store is unreachable or rejected a statement. Never retried."""
