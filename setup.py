# setup.py
from setuptools import setup, find_packages

setup(
    name="etoile",
    version="0.1.0",
    description="A small Lisp interpreter: reader, closures and lexical environments",
    python_requires=">=3.10",
    packages=find_packages(include=["etoile", "etoile.*"]),
    package_data={"etoile": ["prelude/*.lisp"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["etoile=etoile.repl:main"],
    },
    zip_safe=False,
)
