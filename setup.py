# setup.py
from setuptools import setup, find_packages

setup(
    name="mlisp",
    version="0.1.0",
    description="Tree-walking interpreter for a minimal s-expression language",
    packages=find_packages(include=["mlisp", "mlisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mlisp=mlisp.__main__:main"],
    },
    zip_safe=False,
)
