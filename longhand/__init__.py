# Numbers cross the public boundary as plain decimal text ("-12.5"); inside the
# engine they are canonical Decimal digit tuples (longhand.types.decimal_value).

from longhand.errors import (
    LonghandError,
    InvalidNumber,
    DivisionByZero,
    DomainError,
    UnknownOperator,
    UnknownFunction,
    MalformedExpression,
    LimitExceeded,
    Unsupported,
)
from longhand.interpreter import Interpreter, Result, evaluate
