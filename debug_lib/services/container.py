from typing import Any, Dict


class ServiceContainer:
    """A tiny, explicit container for values shared with request handlers.

    Register by key (string) and resolve via `get`. Registered values are
    treated as read-only once the application starts serving.
    """

    def __init__(self) -> None:
        self._singletons: Dict[str, Any] = {}

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key in self._singletons:
            return self._singletons[key]
        raise KeyError(f"No service registered for key '{key}'")
