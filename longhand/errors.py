class LonghandError(Exception):
    """ Base class for all Longhand errors"""
    pass

class InvalidNumber(LonghandError):
    """ Raised when an operand is not well-formed decimal text"""
    pass

class DivisionByZero(LonghandError):
    """ Raised when dividing by zero (scalar or complex)"""
    pass

class DomainError(LonghandError):
    """ Raised when an operation is undefined for its operands"""

class UnknownOperator(LonghandError):
    """ Raised when an operator has no evaluation rule"""

class UnknownFunction(LonghandError):
    """ Raised when a function name is not in the function table"""

class MalformedExpression(LonghandError):
    """ Raised when an expression has missing operands, leftovers or unmatched parentheses"""

class LimitExceeded(LonghandError):
    """ Raised when a configured nesting or step budget is exhausted"""

class Unsupported(LonghandError):
    """ Raised when a result is deliberately not computed.

    Carries the tagged marker text that stands in for the value.
    """
    def __init__(self, marker: str):
        super().__init__(marker)
        self.marker = marker
