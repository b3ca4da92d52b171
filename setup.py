# setup.py
from setuptools import setup, find_packages

setup(
    name="mlsp",
    version="0.1.0",
    description="Micro lispesque language: lexer, parser and tree-walking evaluator",
    packages=find_packages(include=["mlsp", "mlsp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mlsp=mlsp.__main__:main"],
    },
    zip_safe=False,
)
