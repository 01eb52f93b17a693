import hypothesis.strategies as st
import pytest
from hypothesis import given

from arith.arith_ast import Assignment, BinOp, Number, Operator, Variable


def test_number_repr() -> None:
    assert repr(Number(3)) == "Number(3)"


def test_binop_repr() -> None:
    node = BinOp(Operator("+"), Number(3), Variable("x"))
    assert repr(node) == "BinOp(Operator('+'), Number(3), Variable('x'))"


def test_assignment_repr() -> None:
    assert repr(Assignment("x", Number(3))) == "Assignment('x', Number(3))"


def test_eq_same_kind_and_value() -> None:
    assert Number(1) == Number(1)
    assert Variable("a") == Variable("a")


def test_eq_different_kind() -> None:
    assert Variable("1") != Number(1)
    assert Operator("+") != Variable("+")


def test_eq_non_expr() -> None:
    assert Number(1) != 1
    assert Number(1) != "Number(1)"


def test_eq_nested() -> None:
    left = Assignment("y", BinOp(Operator("*"), Number(2), Variable("x")))
    right = Assignment("y", BinOp(Operator("*"), Number(2), Variable("x")))
    other = Assignment("y", BinOp(Operator("/"), Number(2), Variable("x")))
    assert left == right
    assert left != other


def test_nodes_are_hashable() -> None:
    nodes = {Number(1), Number(1), Variable("x"), BinOp(Operator("-"), Number(1), Number(2))}
    assert len(nodes) == 3


def test_nodes_are_immutable() -> None:
    node = Number(3)
    with pytest.raises(AttributeError, match="immutable"):
        node.value = 4  # type: ignore[misc]
    with pytest.raises(AttributeError, match="immutable"):
        del node.value


def test_binop_requires_operator() -> None:
    with pytest.raises(TypeError, match="Operator"):
        BinOp(Number(1), Number(2), Number(3))  # type: ignore[arg-type]


def test_to_dict_nested() -> None:
    node = Assignment("x", BinOp(Operator("+"), Number(3), Variable("y")))
    assert node.to_dict() == {
        "kind": "assignment",
        "variable": "x",
        "expr": {
            "kind": "binop",
            "op": {"kind": "operator", "op": "+"},
            "left": {"kind": "number", "value": 3},
            "right": {"kind": "variable", "name": "y"},
        },
    }


@given(st.integers())  # type: ignore[misc]
def test_number_to_dict(value: int) -> None:
    assert Number(value).to_dict() == {"kind": "number", "value": value}


@given(st.text(), st.text())  # type: ignore[misc]
def test_variable_eq_matches_name_eq(a: str, b: str) -> None:
    assert (Variable(a) == Variable(b)) == (a == b)


@given(st.sampled_from("+-*/"), st.integers(), st.integers())  # type: ignore[misc]
def test_binop_eq_and_hash_consistent(op: str, left: int, right: int) -> None:
    n1 = BinOp(Operator(op), Number(left), Number(right))
    n2 = BinOp(Operator(op), Number(left), Number(right))
    assert n1 == n2
    assert hash(n1) == hash(n2)
