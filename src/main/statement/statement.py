"""
Statement trees for BL (robot control) programs.

A ``Statement`` is one of five kinds: BLOCK, IF, IF_ELSE, WHILE or CALL.
Two interfaces are offered over the same node:

* read-only views (``kind``, ``children``, ``body``, ``name`` ...) used by
  the metrics, which never change the tree;
* kernel operations (``assemble_*``, ``disassemble_*``, ``add_to_block``,
  ``remove_from_block``) that move sub-trees in and out of a node.
"""

from enum import Enum
from typing import List, Optional, Tuple


class Kind(Enum):
    BLOCK = "BLOCK"
    IF = "IF"
    IF_ELSE = "IF_ELSE"
    WHILE = "WHILE"
    CALL = "CALL"


class Condition(Enum):
    NEXT_IS_EMPTY = "NEXT_IS_EMPTY"
    NEXT_IS_NOT_EMPTY = "NEXT_IS_NOT_EMPTY"
    NEXT_IS_WALL = "NEXT_IS_WALL"
    NEXT_IS_NOT_WALL = "NEXT_IS_NOT_WALL"
    NEXT_IS_FRIEND = "NEXT_IS_FRIEND"
    NEXT_IS_NOT_FRIEND = "NEXT_IS_NOT_FRIEND"
    NEXT_IS_ENEMY = "NEXT_IS_ENEMY"
    NEXT_IS_NOT_ENEMY = "NEXT_IS_NOT_ENEMY"
    RANDOM = "RANDOM"
    TRUE = "TRUE"


class Statement:
    """
    Mutable BL statement node. A new node is an empty BLOCK.
    """

    def __init__(self) -> None:
        self._kind: Kind = Kind.BLOCK
        self._condition: Optional[Condition] = None
        self._children: List["Statement"] = []
        self._name: Optional[str] = None

    # Read-only views

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def condition(self) -> Condition:
        self._expect(Kind.IF, Kind.IF_ELSE, Kind.WHILE)
        return self._condition

    @property
    def name(self) -> str:
        self._expect(Kind.CALL)
        return self._name

    @property
    def children(self) -> Tuple["Statement", ...]:
        """
        Snapshot of the nested statements, in order.

        For a BLOCK these are its entries, for IF and WHILE the body and for
        IF_ELSE the "then" and "else" bodies. A CALL has none.
        """
        return tuple(self._children)

    @property
    def body(self) -> "Statement":
        self._expect(Kind.IF, Kind.WHILE)
        return self._children[0]

    @property
    def then_body(self) -> "Statement":
        self._expect(Kind.IF_ELSE)
        return self._children[0]

    @property
    def else_body(self) -> "Statement":
        self._expect(Kind.IF_ELSE)
        return self._children[1]

    def length_of_block(self) -> int:
        self._expect(Kind.BLOCK)
        return len(self._children)

    # Kernel operations

    def new_instance(self) -> "Statement":
        return Statement()

    def clear(self) -> None:
        self._kind = Kind.BLOCK
        self._condition = None
        self._children = []
        self._name = None

    def transfer_from(self, source: "Statement") -> None:
        """
        Take over the content of ``source``, which is left an empty BLOCK.
        """
        if source is self:
            return
        self._kind = source._kind
        self._condition = source._condition
        self._children = source._children
        self._name = source._name
        source.clear()

    def add_to_block(self, pos: int, s: "Statement") -> None:
        """
        Insert the content of ``s`` into this BLOCK at ``pos``.

        Args:
            pos (int): Position, 0 <= pos <= length of the block.
            s (Statement): Statement to insert; it is left an empty BLOCK.
        """
        self._expect(Kind.BLOCK)
        if s._contains(self):
            raise ValueError("Cannot add a statement to its own subtree.")
        if not 0 <= pos <= len(self._children):
            raise IndexError(f"Block position {pos} out of range.")
        entry = Statement()
        entry.transfer_from(s)
        self._children.insert(pos, entry)

    def remove_from_block(self, pos: int) -> "Statement":
        """
        Remove and return the statement at ``pos`` of this BLOCK.
        """
        self._expect(Kind.BLOCK)
        if not 0 <= pos < len(self._children):
            raise IndexError(f"Block position {pos} out of range.")
        return self._children.pop(pos)

    def assemble_if(self, c: Condition, s: "Statement") -> None:
        self._assemble(Kind.IF, c, s)

    def assemble_if_else(self, c: Condition, s1: "Statement", s2: "Statement") -> None:
        if s1 is s2:
            raise ValueError("IF_ELSE bodies must be distinct statements.")
        self._assemble(Kind.IF_ELSE, c, s1, s2)

    def assemble_while(self, c: Condition, s: "Statement") -> None:
        self._assemble(Kind.WHILE, c, s)

    def assemble_call(self, name: str) -> None:
        if not isinstance(name, str):
            raise ValueError(f"Instruction name must be a string, got {name!r}.")
        self.clear()
        self._kind = Kind.CALL
        self._name = name

    def disassemble_if(self, s: "Statement") -> Condition:
        """
        Move the body into ``s`` and return the condition; this node becomes
        an empty BLOCK.
        """
        self._expect(Kind.IF)
        return self._disassemble(s)

    def disassemble_if_else(self, s1: "Statement", s2: "Statement") -> Condition:
        self._expect(Kind.IF_ELSE)
        if s1 is s2:
            raise ValueError("IF_ELSE bodies must be distinct statements.")
        return self._disassemble(s1, s2)

    def disassemble_while(self, s: "Statement") -> Condition:
        self._expect(Kind.WHILE)
        return self._disassemble(s)

    def disassemble_call(self) -> str:
        self._expect(Kind.CALL)
        name = self._name
        self.clear()
        return name

    # Value semantics

    def copy(self) -> "Statement":
        """Deep copy of this node and its subtree."""
        dup = Statement()
        dup._kind = self._kind
        dup._condition = self._condition
        dup._children = [c.copy() for c in self._children]
        dup._name = self._name
        return dup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Statement):
            return NotImplemented
        return (
            self._kind == other._kind
            and self._condition == other._condition
            and self._name == other._name
            and self._children == other._children
        )

    __hash__ = None

    def __repr__(self) -> str:
        if self._kind == Kind.CALL:
            return f"CALL({self._name!r})"
        children_repr = ", ".join(repr(c) for c in self._children)
        if self._kind == Kind.BLOCK:
            return f"BLOCK[{children_repr}]"
        return f"{self._kind.value}({self._condition.value}, {children_repr})"

    # Helpers

    def _expect(self, *kinds: Kind) -> None:
        if self._kind not in kinds:
            expected = "/".join(k.value for k in kinds)
            raise ValueError(f"Expected {expected} statement, got {self._kind.value}.")

    def _contains(self, target: "Statement") -> bool:
        """True when ``target`` is this node or any node below it (by identity)."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node is target:
                return True
            stack.extend(node._children)
        return False

    def _assemble(self, kind: Kind, c: Condition, *bodies: "Statement") -> None:
        if not isinstance(c, Condition):
            raise ValueError(f"Unknown condition: {c!r}.")
        if any(b._contains(self) for b in bodies):
            raise ValueError("A statement cannot be nested in its own body.")
        children = []
        for b in bodies:
            entry = Statement()
            entry.transfer_from(b)
            children.append(entry)
        self.clear()
        self._kind = kind
        self._condition = c
        self._children = children

    def _disassemble(self, *holders: "Statement") -> Condition:
        if any(h is self for h in holders):
            raise ValueError("A statement cannot hold its own body.")
        condition = self._condition
        for holder, child in zip(holders, self._children):
            holder.transfer_from(child)
        self.clear()
        return condition


# Builders copy their arguments, so the same sub-tree may be reused.


def block(*children: Statement) -> Statement:
    s = Statement()
    for i, child in enumerate(children):
        s.add_to_block(i, child.copy())
    return s


def if_(condition: Condition, body: Statement) -> Statement:
    s = Statement()
    s.assemble_if(condition, body.copy())
    return s


def if_else(condition: Condition, then_body: Statement, else_body: Statement) -> Statement:
    s = Statement()
    s.assemble_if_else(condition, then_body.copy(), else_body.copy())
    return s


def while_(condition: Condition, body: Statement) -> Statement:
    s = Statement()
    s.assemble_while(condition, body.copy())
    return s


def call(name: str) -> Statement:
    s = Statement()
    s.assemble_call(name)
    return s
