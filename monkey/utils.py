import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def point_at(code: str, idx: int, context: int = 10) -> str:
    """Two lines: a window of code around idx and a caret under it"""
    line_start = code.rfind("\n", 0, idx) + 1
    line_end = code.find("\n", idx)
    if line_end == -1:
        line_end = len(code)

    print_start_idx = max(line_start, idx - context)
    print_ellipsis_pre = print_start_idx > line_start
    print_end_idx = min(line_end, idx + context)
    print_ellipsis_post = print_end_idx < line_end
    return "\n".join(
        [
            (
                ("..." if print_ellipsis_pre else "")
                + code[print_start_idx:print_end_idx]
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )
