from typing import Optional

from monkey.value import Value


class Environment:
    """Name bindings of one scope, chained to the scope that lexically encloses it.

    Lookups walk outward through the chain, bindings are always written to the
    innermost scope, so an inner `let` shadows an outer name without touching it.
    """

    def __init__(self, outer: Optional["Environment"] = None) -> None:
        self.store: dict[str, Value] = dict()
        self.outer = outer

    def get(self, name: str) -> Optional[Value]:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Value) -> Value:
        self.store[name] = value
        return value

    def enclosed(self) -> "Environment":
        return Environment(outer=self)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        return f"Environment({sorted(self.store)}, outer={self.outer!r})"
