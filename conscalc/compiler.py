"""
Turns a flat expression string into an expression tree.

Parenthesised groups are compiled first and embedded as subtrees, then the
remaining sequence is split on its loosest operator. Among operators of the
same precedence the rightmost one is the split point, which makes every
binary operator left-associative: 8-3-2 is (8-3)-2 and 2^3^2 is (2^3)^2.
A '+' or '-' that starts the expression or follows another operator is a
sign belonging to the operand on its right.
"""
from __future__ import annotations
from typing import List
import math
import re

from conscalc.operators import (Operation, MIN_PRECEDENCE, MAX_PRECEDENCE,
                                operation_of, precedence_of, sign_ops)
from conscalc.expression import Node, Number, Operator, evaluate
from conscalc.errors import ParseError

MAX_DEPTH = 200

CONSTANTS = {
    'pi': math.pi,
    'e': math.e,
}

number_pattern = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)')

# Single characters still to be classified, or subtrees of resolved groups
Items = List[str | Node]

def parse_number(token: str) -> float:
    body = token[1:] if token[:1] in ('+', '-') else token
    if body in CONSTANTS:
        return -CONSTANTS[body] if token[0] == '-' else CONSTANTS[body]
    if not number_pattern.fullmatch(token):
        raise ParseError(f"invalid number '{token}'", token)
    return float(token)

def _check_depth(expression: str, depth: int, max_depth: int) -> None:
    if depth > max_depth:
        raise ParseError(f"expression too deep (more than {max_depth} levels of nesting or chained operators)", expression)

def _resolve_groups(expression: str, depth: int, max_depth: int) -> Items:
    items = []
    i = 0
    while i < len(expression):
        character = expression[i]
        if character == ')':
            raise ParseError(f"unmatched ')' at position {i}", expression)
        if character != '(':
            items.append(character)
            i += 1
            continue

        nesting = 0
        for j in range(i, len(expression)):
            if expression[j] == '(':
                nesting += 1
            elif expression[j] == ')':
                nesting -= 1
            if nesting == 0:
                break
        if nesting:
            raise ParseError(f"unmatched '(' at position {i}", expression)

        items.append(_compile(expression[i + 1:j], depth + 1, max_depth))
        i = j + 1
    return items

def _is_sign(items: Items, index: int) -> bool:
    if index == 0:
        return True
    previous = items[index - 1]
    return isinstance(previous, str) and operation_of(previous) != Operation.NONE

def _split_point(items: Items, precedence: int) -> int|None:
    for i in reversed(range(len(items))):
        item = items[i]
        if not isinstance(item, str):
            continue
        operation = operation_of(item)
        if precedence_of(operation) != precedence:
            continue
        if operation in sign_ops and _is_sign(items, i):
            continue
        return i
    return None

def _literal(items: Items, expression: str) -> Node:
    if len(items) == 1 and not isinstance(items[0], str):
        return items[0]
    if len(items) == 2 and items[0] in ('+', '-') and not isinstance(items[1], str):
        if items[0] == '-':
            return Operator(Operation.SUBTRACT, Number(0.0), items[1])
        return items[1]
    if not all(isinstance(item, str) for item in items):
        raise ParseError(f"missing operator next to parenthesis in '{expression}'", expression)
    return Number(parse_number(''.join(items)))

def _compile_items(items: Items, expression: str, depth: int, max_depth: int) -> Node:
    _check_depth(expression, depth, max_depth)
    if not items:
        raise ParseError(f"empty operand in '{expression}'", expression)

    # Loosest operators first, so they end up closest to the root
    for precedence in range(MIN_PRECEDENCE, MAX_PRECEDENCE + 1):
        index = _split_point(items, precedence)
        if index is None:
            continue
        lhs = _compile_items(items[:index], expression, depth + 1, max_depth)
        rhs = _compile_items(items[index + 1:], expression, depth + 1, max_depth)
        return Operator(operation_of(items[index]), lhs, rhs)

    return _literal(items, expression)

def _compile(expression: str, depth: int, max_depth: int) -> Node:
    _check_depth(expression, depth, max_depth)
    if not expression:
        raise ParseError("empty expression", expression)
    items = _resolve_groups(expression, depth, max_depth)
    return _compile_items(items, expression, depth, max_depth)

def compile_expression(text: str, max_depth: int = MAX_DEPTH) -> Node:
    return _compile(''.join(text.split()), 0, max_depth)

def calculate(text: str, max_depth: int = MAX_DEPTH) -> float:
    return evaluate(compile_expression(text, max_depth))
