from src.main.config import PRIMITIVE_INSTRUCTIONS
from src.main.metrics import metric
from src.main.statement import Kind, Statement


@metric("User-Defined Calls")
def count_of_user_defined_calls(s: Statement) -> int:
    """
    Number of CALL leaves naming an instruction that is not primitive.
    """
    if s.kind == Kind.CALL:
        return 0 if s.name in PRIMITIVE_INSTRUCTIONS else 1
    if s.kind == Kind.BLOCK:
        return sum(count_of_user_defined_calls(c) for c in s.children)
    if s.kind in (Kind.IF, Kind.WHILE):
        return count_of_user_defined_calls(s.body)
    if s.kind == Kind.IF_ELSE:
        return count_of_user_defined_calls(s.then_body) + count_of_user_defined_calls(s.else_body)
    raise ValueError(f"Unknown statement kind: {s.kind!r}")
