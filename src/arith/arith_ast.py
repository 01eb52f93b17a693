"""
Defines the expression tree produced by the arith grammar.

Classes:
    Expr:
        Base class for every node. Nodes are immutable once built, compare
        structurally and serialize to plain dictionaries with `to_dict()`.

    Number, Variable, Operator, Assignment, BinOp:
        The concrete node kinds. `Operator` is a pending binary operator token
        that is folded into a `BinOp` once both operands have been parsed.

    ExprDict:
        TypedDict describing the serialized form of a node, suitable for JSON output.

Each node owns its children exclusively. Trees are built bottom-up during
parsing, so sharing and cycles cannot occur.

Example:
    node = BinOp(Operator("+"), Number(3), Variable("x"))
    node.to_dict()["left"] == {"kind": "number", "value": 3}
"""

from typing import Any, TypedDict


class ExprDict(TypedDict, total=False):
    """
    Serialized form of an Expr node.

    Fields:
        kind (str): Node kind ("number", "variable", "operator", "assignment", "binop").
        value (int): Integer value of a number.
        name (str): Name of a variable.
        op (str | ExprDict): Operator character, or the serialized operator of a binop.
        variable (str): Assigned variable name.
        expr (ExprDict): Assigned expression.
        left (ExprDict): Left operand of a binop.
        right (ExprDict): Right operand of a binop.
    """

    kind: str
    value: int
    name: str
    op: Any
    variable: str
    expr: "ExprDict"
    left: "ExprDict"
    right: "ExprDict"


class Expr:
    """
    Base class for expression tree nodes.

    Subclasses list their fields in `_fields`; equality, hashing, `repr` and
    `to_dict()` are derived from them. Assigning or deleting an attribute after
    construction raises AttributeError.
    """

    kind: str = "expr"
    _fields: tuple[str, ...] = ()

    def _init_fields(self, **values: Any) -> None:
        for name in self._fields:
            object.__setattr__(self, name, values[name])

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._values())
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._values()))

    def to_dict(self) -> ExprDict:
        data: dict[str, Any] = {"kind": self.kind}
        for name in self._fields:
            val = getattr(self, name)
            data[name] = val.to_dict() if isinstance(val, Expr) else val
        return data  # type: ignore[return-value]


class Number(Expr):
    kind = "number"
    _fields = ("value",)
    value: int

    def __init__(self, value: int) -> None:
        self._init_fields(value=value)


class Variable(Expr):
    kind = "variable"
    _fields = ("name",)
    name: str

    def __init__(self, name: str) -> None:
        self._init_fields(name=name)


class Operator(Expr):
    kind = "operator"
    _fields = ("op",)
    op: str

    def __init__(self, op: str) -> None:
        self._init_fields(op=op)


class Assignment(Expr):
    kind = "assignment"
    _fields = ("variable", "expr")
    variable: str
    expr: Expr

    def __init__(self, variable: str, expr: Expr) -> None:
        self._init_fields(variable=variable, expr=expr)


class BinOp(Expr):
    """
    A single binary operation.

    Args:
        op (Operator): The operator token joining the operands.
        left (Expr): Left operand.
        right (Expr): Right operand.

    Raises:
        TypeError: If `op` is not an Operator.
    """

    kind = "binop"
    _fields = ("op", "left", "right")
    op: Operator
    left: Expr
    right: Expr

    def __init__(self, op: Operator, left: Expr, right: Expr) -> None:
        if not isinstance(op, Operator):
            raise TypeError(
                f"BinOp operator must be an Operator, got {type(op).__name__}"
            )
        self._init_fields(op=op, left=left, right=right)


__all__ = ["Assignment", "BinOp", "Expr", "ExprDict", "Number", "Operator", "Variable"]
