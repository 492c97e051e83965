class CalcError(Exception):
    pass

class ParseError(CalcError):
    def __init__(self, message: str, expression: str|None = None) -> None:
        super().__init__(message)
        self.expression = expression

class EvaluationError(CalcError):
    pass

class DivideByZero(EvaluationError):
    pass

class DomainError(EvaluationError):
    pass
