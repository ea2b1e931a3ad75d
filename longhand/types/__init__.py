from longhand.types.decimal_value import Decimal, Ordering, ZERO, ONE
from longhand.types.complex_value import ComplexValue
from longhand.types.unevaluated import Unevaluated
from longhand.types.token import (
    Token,
    NumberToken,
    OperatorToken,
    FunctionToken,
    VariableToken,
    LeftParen,
    RightParen,
)
