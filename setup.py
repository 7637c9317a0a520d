# setup.py
from setuptools import setup, find_packages

setup(
    name="slang",
    version="0.3.0",
    description="A small Lisp-family interpreter with tail-call elimination",
    packages=find_packages(include=["slang", "slang.*"]),
    package_data={"slang": ["prelude/*.slang"]},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["slang = slang.cli:main"],
    },
    zip_safe=False,
)
