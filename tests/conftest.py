import importlib
import os

import pytest

# This test configuration runs every test module twice:
# 1) with the pure-Python digit kernels ["py"]
# 2) with the Cython digit kernels, if the extension was built ["cy"]
# The kernel is chosen when longhand.arithmetic.digits is imported, so the
# fixture flips LONGHAND_CY_DIGITS and reloads that module. The engine looks
# kernels up as module attributes, so no other module needs reloading.
# Module scope keeps hypothesis' function-scoped-fixture health check quiet.


@pytest.fixture(scope="module", params=["py", "cy"], autouse=True)
def digit_kernel(request):
    from longhand.arithmetic import digits

    previous = os.environ.get("LONGHAND_CY_DIGITS")
    os.environ["LONGHAND_CY_DIGITS"] = "0" if request.param == "py" else "1"
    importlib.reload(digits)
    yield digits.KERNEL

    if previous is None:
        os.environ.pop("LONGHAND_CY_DIGITS", None)
    else:
        os.environ["LONGHAND_CY_DIGITS"] = previous
    importlib.reload(digits)
