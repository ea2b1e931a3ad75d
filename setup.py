# setup.py
from setuptools import setup, find_packages, Extension
from Cython.Build import cythonize
import os

# Full path to the pyx
pyx_path = os.path.join("longhand", "arithmetic", "digits_cy.pyx")

setup(
    name="longhand",
    version="0.1.0",
    description="Arbitrary-precision decimal arithmetic and infix expression evaluation",
    packages=find_packages(include=["longhand", "longhand.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    ext_modules=cythonize(
        Extension(
            name="longhand.arithmetic.digits_cy",  # module path for import
            sources=[pyx_path],
            optional=True,  # pure-Python kernels are used when the build fails
        ),
        compiler_directives={'language_level': "3", "boundscheck": False, "wraparound": False}
    ),
    zip_safe=False,
)
