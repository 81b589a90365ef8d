from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from lucid.errors import LucidError, UNDEFINED_VARIABLE
from lucid.types import ErrorVal


class Environment(Mapping):
    """Immutable mapping from names to stored values.

    Declarations never modify an environment in place; `bind` hands back a
    new environment holding the old bindings plus the new one.
    """
    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values) if values else {}

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Environment({self._values!r})"

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def lookup(self, name: str) -> Any:
        if name in self._values:
            return self._values[name]
        raise LucidError(ErrorVal(UNDEFINED_VARIABLE, f'undefined variable {name}'))

    def bind(self, name: str, value: Any) -> 'Environment':
        values = dict(self._values)
        values[name] = value
        return Environment(values)
