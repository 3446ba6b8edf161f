import argparse
from pathlib import Path

from termcolor import colored

from monkey.environment import Environment
from monkey.errors import MonkeyError
from monkey.runtime import DEFAULT_MAX_CALL_DEPTH, evaluate

PROMPT = ">> "


def print_error(e: Exception) -> None:
    if isinstance(e, MonkeyError):
        print(colored("error: ", "red", attrs=["bold"]) + str(e))
    else:
        # anything else escaping the interpreter is a bug in it, not in the input
        print(colored("internal error: ", "red", attrs=["bold"]) + f"{type(e).__name__}: {e}")


def run(code: str, env: Environment, max_call_depth: int) -> bool:
    try:
        result = evaluate(code, env, max_call_depth=max_call_depth)
    except Exception as e:
        print_error(e)
        return False
    print(result)
    return True


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser()
    arg_parser.add_argument("file", help="source file to run before the interactive prompt", nargs="?")
    arg_parser.add_argument(
        "--max-call-depth",
        type=int,
        default=DEFAULT_MAX_CALL_DEPTH,
        help=f"deepest function call nesting before a stack overflow error (default: {DEFAULT_MAX_CALL_DEPTH})",
    )
    args = arg_parser.parse_args()

    env = Environment()
    if args.file is not None:
        run(Path(args.file).read_text(), env, args.max_call_depth)

    while True:
        try:
            code = input(PROMPT)
        except EOFError:
            print()
            break

        if code.strip() == "exit":
            break
        if not code.strip():
            continue

        run(code, env, args.max_call_depth)
