# menagerie/registry.py
from typing import Any, Callable, Dict, List


class Registry:
    """String-keyed lookup table, filled by decorators at import time."""

    def __init__(self, name: str):
        self.name = name
        self._entries: Dict[str, Any] = {}

    def register(self, key: str) -> Callable[[Any], Any]:
        def decorator(obj):
            if key in self._entries:
                raise KeyError(f"'{key}' is already registered in {self.name} registry")
            self._entries[key] = obj
            return obj
        return decorator

    def get(self, key: str) -> Any:
        try:
            return self._entries[key]
        except KeyError:
            available = ", ".join(self._entries)
            raise KeyError(
                f"Unknown {self.name}: '{key}'. Available: [{available}]"
            ) from None

    def keys(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
