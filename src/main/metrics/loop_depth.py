from src.main.metrics import metric
from src.main.statement import Kind, Statement


@metric("Loop Depth")
def loop_depth(s: Statement) -> int:
    """
    Deepest nesting of WHILE statements; 0 when ``s`` has no loop.

    IF and IF_ELSE do not add a level, a WHILE nested in either still counts.
    """
    if s.kind == Kind.CALL:
        return 0
    if s.kind == Kind.WHILE:
        return 1 + loop_depth(s.body)
    if s.kind in (Kind.BLOCK, Kind.IF, Kind.IF_ELSE):
        return max((loop_depth(c) for c in s.children), default=0)
    raise ValueError(f"Unknown statement kind: {s.kind!r}")
