from enum import Enum, auto

class Operation(Enum):
    NONE = 0
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    POWER = auto()

MIN_PRECEDENCE = 1
MAX_PRECEDENCE = 3

_operation_map = {
    '+': Operation.ADD,
    '-': Operation.SUBTRACT,
    '*': Operation.MULTIPLY,
    '/': Operation.DIVIDE,
    '^': Operation.POWER,
}

_symbol_map = {op: char for char, op in _operation_map.items()}

_precedence_map = {
    Operation.ADD: 1,
    Operation.SUBTRACT: 1,
    Operation.MULTIPLY: 2,
    Operation.DIVIDE: 2,
    Operation.POWER: 3,
}

sign_ops = [Operation.ADD, Operation.SUBTRACT]

def operation_of(character: str) -> Operation:
    return _operation_map.get(character, Operation.NONE)

def precedence_of(operation: Operation) -> int:
    return _precedence_map.get(operation, 0)

def symbol_of(operation: Operation) -> str:
    return _symbol_map[operation]
