"""
setup.py for the appcontrol voice control demo.

Usage:
    pip install -e .[test]
    python -m appcontrol --phrase "play dune now"
"""
from setuptools import find_namespace_packages, setup

setup(
    name="appcontrol",
    version="0.1.0",
    description="Voice trigger detection driving a swipeable media list",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["appcontrol", "appcontrol.*"], exclude=["appcontrol.tests"]),
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["appcontrol=appcontrol.app:main"],
    },
)
