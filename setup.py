# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.1.0",
    description="Evaluator for a minimal ESTree expression/statement language",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["sprig=sprig.__main__:main"]},
    zip_safe=False,
)
