# setup.py
from setuptools import setup, find_packages

setup(
    name="minilang",
    version="0.1.0",
    description="Minimal expression-language runtime: reader, unhygienic macro expander and tree-walking evaluator",
    packages=find_packages(include=["minilang", "minilang.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilang = minilang.cli:main"],
    },
    zip_safe=False,
)
