"""Request-scoped current identity."""

from contextvars import ContextVar, Token

_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


def set_current_user_id(user_id: str | None) -> Token:
    """Bind the caller's user id to the current context."""
    return _current_user_id.set(user_id)


def reset_current_user_id(token: Token) -> None:
    _current_user_id.reset(token)


class RequestIdentityProvider:
    """Current identity provider backed by the request context."""

    def current_user_id(self) -> str | None:
        return _current_user_id.get()
