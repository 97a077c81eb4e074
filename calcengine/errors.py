"""
Failure kinds raised by the expression engine.

Every stage raises a subclass of CalculatorError as soon as it sees input it
cannot handle. Numeric domain problems (division by zero, negative factorial,
sqrt of a negative number) are not errors at this level: they travel through
the evaluation stack as NaN and only surface as InvalidResult at the end.
"""


class CalculatorError(Exception):
    pass


class InvalidCharacter(CalculatorError):
    def __init__(self, char: str, position: int = -1):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character: {char!r}")


class UnknownFunction(InvalidCharacter):
    """An identifier run that does not name a known function."""

    def __init__(self, name: str, position: int = -1):
        self.name = name
        self.char = name
        self.position = position
        CalculatorError.__init__(self, f"Unknown function: {name!r}")


class MismatchedParentheses(CalculatorError):
    pass


class MalformedExpression(CalculatorError):
    pass


class StackUnderflow(MalformedExpression):
    pass


class InvalidResult(CalculatorError):
    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Result is not a finite number: {value}")
