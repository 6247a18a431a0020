import json
from pathlib import Path
from typing import Any, Dict

from src.main.config import ENCODING
from src.main.statement.statement import Condition, Kind, Statement


def to_dict(s: Statement) -> Dict[str, Any]:
    """
    Convert a statement tree to nested plain dictionaries.

    Args:
        s (Statement): Root of the tree.

    Returns:
        dict: JSON-serialisable representation of ``s``.
    """
    if s.kind == Kind.BLOCK:
        return {"kind": s.kind.value, "children": [to_dict(c) for c in s.children]}
    if s.kind == Kind.CALL:
        return {"kind": s.kind.value, "name": s.name}
    if s.kind == Kind.IF_ELSE:
        return {
            "kind": s.kind.value,
            "condition": s.condition.value,
            "then": to_dict(s.then_body),
            "else": to_dict(s.else_body),
        }
    return {"kind": s.kind.value, "condition": s.condition.value, "body": to_dict(s.body)}


def from_dict(data: Dict[str, Any]) -> Statement:
    """
    Build a statement tree from the form produced by ``to_dict``.

    Raises:
        ValueError: On unknown kinds or conditions and on missing fields.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Statement must be an object, got {type(data).__name__}.")
    kind = _enum(Kind, _field(data, "kind"))
    s = Statement()
    if kind == Kind.BLOCK:
        children = _field(data, "children")
        if not isinstance(children, list):
            raise ValueError("BLOCK children must be a list.")
        for i, child in enumerate(children):
            s.add_to_block(i, from_dict(child))
    elif kind == Kind.CALL:
        name = _field(data, "name")
        if not isinstance(name, str):
            raise ValueError(f"CALL name must be a string, got {name!r}.")
        s.assemble_call(name)
    elif kind == Kind.IF_ELSE:
        cond = _enum(Condition, _field(data, "condition"))
        s.assemble_if_else(
            cond, from_dict(_field(data, "then")), from_dict(_field(data, "else"))
        )
    elif kind == Kind.IF:
        s.assemble_if(_enum(Condition, _field(data, "condition")), from_dict(_field(data, "body")))
    else:
        s.assemble_while(_enum(Condition, _field(data, "condition")), from_dict(_field(data, "body")))
    return s


def load(path: Path) -> Statement:
    with open(path, encoding=ENCODING) as f:
        return from_dict(json.load(f))


def dump(s: Statement, path: Path) -> None:
    with open(path, "w", encoding=ENCODING) as f:
        json.dump(to_dict(s), f, indent=2)


def _field(data: Dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing field {key!r} in {data.get('kind', 'statement')}.")
    return data[key]


def _enum(enum_cls, value: Any):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {value!r}.") from None
