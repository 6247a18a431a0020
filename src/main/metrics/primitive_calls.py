from src.main.config import PRIMITIVE_INSTRUCTIONS
from src.main.metrics import metric
from src.main.statement import Kind, Statement


@metric("Primitive Calls")
def count_of_primitive_calls(s: Statement) -> int:
    """
    Number of calls to primitive instructions (move, turnleft, turnright,
    infect, skip) anywhere in ``s``.

    Only CALL leaves are counted; conditions never contribute. The tree is
    read through its read-only views and is left untouched.
    """
    if s.kind == Kind.CALL:
        return 1 if s.name in PRIMITIVE_INSTRUCTIONS else 0
    if s.kind == Kind.BLOCK:
        return sum(count_of_primitive_calls(c) for c in s.children)
    if s.kind in (Kind.IF, Kind.WHILE):
        return count_of_primitive_calls(s.body)
    if s.kind == Kind.IF_ELSE:
        return count_of_primitive_calls(s.then_body) + count_of_primitive_calls(s.else_body)
    raise ValueError(f"Unknown statement kind: {s.kind!r}")
