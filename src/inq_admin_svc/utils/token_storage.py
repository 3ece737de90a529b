from typing import Optional, Protocol

from inq_admin_svc import config


class TokenStorage(Protocol):
    """Holds one credential token under a fixed key."""

    def get(self) -> Optional[str]:
        ...

    def set(self, token: str) -> None:
        ...

    def clear(self) -> None:
        ...


class MemoryTokenStorage:
    """Token storage scoped to one caller.

    Seeded with whatever token the caller presented; the login/logout routes copy any
    change back to the caller's cookie.
    """

    def __init__(self, token: Optional[str] = None, key: Optional[str] = None) -> None:
        self.key = key or config.TOKEN_STORAGE_KEY
        self._items = {}
        if token:
            self._items[self.key] = token

    def get(self) -> Optional[str]:
        return self._items.get(self.key) or None

    def set(self, token: str) -> None:
        if not isinstance(token, str) or not token:
            raise ValueError("token must be a non-empty string")
        self._items[self.key] = token

    def clear(self) -> None:
        self._items.pop(self.key, None)
