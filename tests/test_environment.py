from monkey.environment import Environment
from monkey.value import TRUE, Integer


def test_get_and_set() -> None:
    env = Environment()
    assert env.get("a") is None
    assert env.set("a", Integer(1)) == Integer(1)
    assert env.get("a") == Integer(1)
    assert "a" in env
    assert "b" not in env


def test_lookup_walks_outward() -> None:
    outer = Environment()
    outer.set("a", Integer(1))
    inner = outer.enclosed()
    innermost = inner.enclosed()
    assert innermost.outer is inner
    assert inner.outer is outer
    assert innermost.get("a") == Integer(1)


def test_set_shadows_without_touching_outer() -> None:
    outer = Environment()
    outer.set("a", Integer(1))
    inner = outer.enclosed()
    inner.set("a", TRUE)
    inner.set("b", Integer(2))
    assert inner.get("a") == TRUE
    assert outer.get("a") == Integer(1)
    assert outer.get("b") is None


def test_children_share_outer_scope() -> None:
    outer = Environment()
    first, second = outer.enclosed(), outer.enclosed()
    outer.set("late", Integer(3))
    assert first.get("late") == Integer(3)
    assert second.get("late") == Integer(3)
