import random
import re
import string

from monkey.runtime import evaluate
from monkey.value import Integer


def eval_py(code: str) -> object:
    # "/" truncates toward zero in Monkey, so division is left out of the alphabet
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | str:
    try:
        result = evaluate(code)
    except Exception as e:
        return str(e)
    if isinstance(result, Integer):
        return result.v
    return str(result)


if __name__ == "__main__":
    alphabet = string.digits + "()+-* "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"(^|[(+\-*])\s*\+", code):
            continue  # no unary plus in Monkey

        if re.findall(r"\d\s+\d", code):
            continue  # "1 2" is two statements in Monkey

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, tuple):
            continue  # "()" is an empty tuple in Python
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
