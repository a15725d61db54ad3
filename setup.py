"""Package setup for nuage_session."""

from setuptools import setup, find_packages

setup(
    name="nuage-session",
    version="1.0.0",
    description="Client-side session layer for the Nuage VSD REST API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nuage-session=nuage_session.cli:main",
        ],
    },
)
