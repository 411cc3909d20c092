"""Current identity port."""

from typing import Protocol


class CurrentIdentityProvider(Protocol):
    """Resolves the user id of the caller in the current context."""

    def current_user_id(self) -> str | None: ...
