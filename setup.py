# setup.py
from setuptools import setup, find_packages

setup(
    name="sigma",
    version="0.1.0",
    description="A minimal interpreter for a Lisp-like S-expression language",
    packages=find_packages(include=["sigma", "sigma.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
