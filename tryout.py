from monkey.environment import Environment
from monkey.errors import MonkeyRuntimeError
from monkey.parser import ParserError, parse
from monkey.runtime import eval_program
from monkey.tokenizer import tokenize

for code in [
    "5",
    "-1 + 1",
    "4 + 6 * 3",
    "(4 + 6) * 3",
    "7 / 2; -7 / 2",
    "!5 == false",
    "let a = 1; let b = 2; let c = a + b; c",
    "let max = fn(x, y) { if (x > y) { x } else { y } }; max(3, 8)",
    "let adder = fn(x) { fn(y) { x + y } }; adder(2)(40)",
    "let fact = fn(n) { if (n < 2) { return 1; } n * fact(n - 1) }; fact(20)",
    "let 名前 = 10; 名前 * 2",
    "5 + true",
    "let x 5;",
    "foo_bar",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    print(f"tokens: {' '.join(str(t) for t in tokenize(code))}")

    try:
        program = parse(code)
    except ParserError as e:
        print(e)
        continue
    statements_str = "\n".join(f" {i + 1:> 2}: {stmt}" for i, stmt in enumerate(program.statements))
    print(f"ast:\n{statements_str}")

    env = Environment()
    try:
        result = eval_program(program, env)
    except MonkeyRuntimeError as e:
        print(f"runtime error: {e}")
        continue
    print(f"result: {result}")
    print(f"bindings: {', '.join(f'{name} = {value}' for name, value in env.store.items())}")
