from dataclasses import dataclass


class MonkeyError(Exception):
    """Base for every error the interpreter reports: syntactic and runtime"""


@dataclass
class MonkeyRuntimeError(MonkeyError):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg
