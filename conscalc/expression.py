from __future__ import annotations
from dataclasses import dataclass
import math

from conscalc.operators import Operation, symbol_of
from conscalc.errors import DivideByZero, DomainError

@dataclass(frozen=True)
class Number:
    value: float

@dataclass(frozen=True)
class Operator:
    operation: Operation
    left: Node
    right: Node

    def __post_init__(self) -> None:
        if self.operation == Operation.NONE:
            raise ValueError("Operator node needs an operation")

Node = Number | Operator

def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        raise DomainError(f"{base} ^ {exponent} is out of range") from None
    except ValueError:
        raise DomainError(f"{base} ^ {exponent} has no real result") from None

def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0:
        raise DivideByZero(f"division of {lhs} by zero")
    return lhs / rhs

op_map = {
    Operation.ADD: lambda x, y: x + y,
    Operation.SUBTRACT: lambda x, y: x - y,
    Operation.MULTIPLY: lambda x, y: x * y,
    Operation.DIVIDE: _divide,
    Operation.POWER: _power,
}

def evaluate(node: Node) -> float:
    match node:
        case Number(value):
            return value
        case Operator(operation, left, right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            result = op_map[operation](lhs, rhs)
            if not math.isfinite(result):
                raise DomainError(f"{lhs} {symbol_of(operation)} {rhs} is out of range")
            return result
    raise TypeError(f"Not an expression node: {node!r}")

def _format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(value)

def dump(node: Node, level=0) -> str:
    """Renders the tree one node per line, children indented below their parent."""
    match node:
        case Number(value):
            return "\t" * level + _format_value(value) + "\n"
        case Operator(operation, left, right):
            ret = "\t" * level + symbol_of(operation) + "\n"
            return ret + dump(left, level + 1) + dump(right, level + 1)
    raise TypeError(f"Not an expression node: {node!r}")

def to_infix(node: Node) -> str:
    match node:
        case Number(value):
            return _format_value(value)
        case Operator(operation, left, right):
            return f"({to_infix(left)}{symbol_of(operation)}{to_infix(right)})"
    raise TypeError(f"Not an expression node: {node!r}")
