# setup.py
from setuptools import setup, find_packages

setup(
    name="arbor",
    version="0.1.0",
    description="Tree-walking evaluator for JSON-encoded expression trees",
    packages=find_packages(include=["arbor", "arbor.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["arbor=arbor.__main__:main"],
    },
    zip_safe=False,
)
