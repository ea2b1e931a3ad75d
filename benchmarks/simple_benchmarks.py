import importlib
import os
from timeit import timeit

from longhand.arithmetic import digits, engine
from longhand.interpreter import Interpreter
from longhand.reader.lexer import tokenize
from longhand.reader.shunting_yard import to_postfix
from longhand.evaluation.evaluator import evaluate_postfix
from longhand.types.decimal_value import Decimal


def _use_kernel(name: str) -> str:
    """Reload the digit kernels as 'py' or 'cy'; returns the kernel actually loaded."""
    os.environ["LONGHAND_CY_DIGITS"] = "0" if name == "py" else "1"
    importlib.reload(digits)
    return digits.KERNEL


def time_engine(fn, a: str, b: str, rounds: int) -> float:
    """Time one engine operation on pre-parsed operands."""
    x, y = Decimal.parse(a), Decimal.parse(b)
    # Warmup
    fn(x, y)
    # Timed
    return timeit(lambda: fn(x, y), number=rounds)


def time_pipeline(expression: str, rounds: int) -> float:
    """Time the full text -> tokens -> postfix -> value path."""
    itp = Interpreter()
    itp.eval(expression)
    return timeit(lambda: itp.eval(expression), number=rounds)


def time_evaluation_only(expression: str, rounds: int) -> float:
    """Time postfix evaluation alone: tokenize and reorder once."""
    postfix = to_postfix(tokenize(expression))
    evaluate_postfix(postfix)
    return timeit(lambda: evaluate_postfix(postfix), number=rounds)


BIG_A = "1234567890" * 20 + ".0987654321"
BIG_B = "9876543210" * 15 + ".123456789"

ENGINE_CASES = [
    ("add (200 digits)", engine.add, BIG_A, BIG_B, 5000),
    ("multiply (200 x 150 digits)", engine.multiply, BIG_A, BIG_B, 200),
    ("divide (200 / 150 digits)", engine.divide, BIG_A, BIG_B, 200),
    ("power 2^1000", engine.power, "2", "1000", 50),
    ("power_decimal 2^0.5", engine.power_decimal, "2", "0.5", 50),
    ("nth_root cube root of 10", engine.nth_root, "10", "3", 50),
]

PIPELINE_CASES = [
    ("simple precedence", "2+3*4-5/2", 5000),
    ("complex product", "(1+2*i)*(3+4*i)/(5-6*i)", 2000),
    ("right-assoc power", "2^3^2", 2000),
    ("placeholders", "sin(sqrt(abs(3+4*i)))", 2000),
]


if __name__ == "__main__":
    for kernel in ("py", "cy"):
        loaded = _use_kernel(kernel)
        print(f"Digit kernels: requested {kernel}, loaded {loaded}")
        for name, fn, a, b, rounds in ENGINE_CASES:
            print(f"  {name}: {time_engine(fn, a, b, rounds):.6f}s  [rounds={rounds}]")

    _use_kernel("cy")
    for name, expression, rounds in PIPELINE_CASES:
        full = time_pipeline(expression, rounds)
        only = time_evaluation_only(expression, rounds)
        print(f"Benchmark: {name}")
        print(f"  pipeline: {full:.6f}s  |  evaluation only: {only:.6f}s  [rounds={rounds}]")
