"""Setup script for branchscout."""

from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "branchscout" / "__init__.py"
    for line in init.read_text().splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError("Unable to find __version__")


setup(
    name="branchscout",
    version=read_version(),
    description="Infer the base branch of a pull request from git branch topology",
    packages=find_packages(include=["branchscout", "branchscout.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "branchscout=branchscout.__main__:main",
        ],
    },
)
