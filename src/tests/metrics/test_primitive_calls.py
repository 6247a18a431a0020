import pytest

from src.main.metrics import registry
from src.main.metrics.primitive_calls import count_of_primitive_calls
from src.main.statement import Condition, Statement, block, call, if_, if_else, while_


def _nested(depth: int) -> Statement:
    """
    BLOCK > WHILE > IF_ELSE chains, repeated ``depth`` times. Every level
    holds one primitive ("move") and one non-primitive ("jump") leaf.
    """
    s = block()
    for _ in range(depth):
        s = block(
            while_(
                Condition.NEXT_IS_NOT_WALL,
                if_else(Condition.RANDOM, call("move"), block(call("jump"), s)),
            )
        )
    return s


@pytest.mark.parametrize(
    "name, expected",
    [
        pytest.param("move", 1, id="move"),
        pytest.param("turnleft", 1, id="turnleft"),
        pytest.param("turnright", 1, id="turnright"),
        pytest.param("infect", 1, id="infect"),
        pytest.param("skip", 1, id="skip"),
        pytest.param("turn", 0, id="prefix-of-primitive"),
        pytest.param("MOVE", 0, id="case-sensitive"),
        pytest.param("jump", 0, id="user-defined"),
        pytest.param("", 0, id="empty-name"),
        pytest.param(" move", 0, id="leading-space"),
    ],
)
def test_single_call(name: str, expected: int) -> None:
    assert count_of_primitive_calls(call(name)) == expected


@pytest.mark.parametrize(
    "tree, expected",
    [
        pytest.param(block(), 0, id="empty-block"),
        pytest.param(
            block(call("move"), call("jump"), call("skip")),
            2,
            id="flat-block",
        ),
        pytest.param(
            if_(Condition.NEXT_IS_ENEMY, call("infect")),
            1,
            id="if-body",
        ),
        pytest.param(
            while_(Condition.TRUE, block()),
            0,
            id="while-empty-body",
        ),
        pytest.param(
            if_else(Condition.NEXT_IS_EMPTY, call("move"), call("turnright")),
            2,
            id="if-else-both-bodies",
        ),
        pytest.param(
            if_else(Condition.NEXT_IS_WALL, call("findWall"), block()),
            0,
            id="if-else-no-primitives",
        ),
        pytest.param(
            block(
                call("move"),
                if_(Condition.TRUE, call("turnleft")),
                while_(Condition.NEXT_IS_EMPTY, block(call("infect"), call("jump"))),
                call("skip"),
            ),
            4,
            id="mixed-program",
        ),
        pytest.param(_nested(1), 1, id="nested-depth-1"),
        pytest.param(_nested(10), 10, id="nested-depth-10"),
    ],
)
def test_count_of_primitive_calls(tree: Statement, expected: int) -> None:
    result = count_of_primitive_calls(tree)
    assert result >= 0
    assert result == expected


def test_block_is_sum_of_children() -> None:
    a = if_else(Condition.RANDOM, call("move"), call("run"))
    b = while_(Condition.NEXT_IS_FRIEND, block(call("skip"), call("skip")))
    c = call("turnleft")
    total = count_of_primitive_calls(a) + count_of_primitive_calls(b) + count_of_primitive_calls(c)
    assert count_of_primitive_calls(block(a, b, c)) == total
    assert count_of_primitive_calls(block(c, a, b)) == total


@pytest.mark.parametrize("cond", list(Condition))
def test_condition_never_contributes(cond: Condition) -> None:
    body = block(call("move"), call("dance"))
    assert count_of_primitive_calls(if_(cond, body)) == count_of_primitive_calls(body)
    assert count_of_primitive_calls(while_(cond, body)) == count_of_primitive_calls(body)
    other = block(call("skip"), call("infect"))
    expected = count_of_primitive_calls(body) + count_of_primitive_calls(other)
    assert count_of_primitive_calls(if_else(cond, body, other)) == expected


def test_tree_is_unchanged_and_count_is_stable() -> None:
    tree = block(
        call("move"),
        if_else(Condition.NEXT_IS_WALL, call("turnleft"), while_(Condition.TRUE, call("x"))),
        if_(Condition.RANDOM, block(call("infect"))),
    )
    before = tree.copy()
    first = count_of_primitive_calls(tree)
    assert tree == before
    assert count_of_primitive_calls(tree) == first == 3
    assert tree == before
    assert repr(tree) == repr(before)


def test_errors_from_tree_propagate() -> None:
    class Broken(Statement):
        @property
        def children(self):
            raise RuntimeError("tree access failed")

    with pytest.raises(RuntimeError, match="tree access failed"):
        count_of_primitive_calls(Broken())


def test_registered() -> None:
    assert registry["Primitive Calls"] is count_of_primitive_calls
