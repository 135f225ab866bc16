from setuptools import find_packages, setup

setup(
    name="diff-numerics",
    version="1.0.0",
    description="Compare numeric data files column by column within a relative tolerance",
    packages=find_packages(include=["diff_numerics", "diff_numerics.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command line interface
        "rich",  # Terminal formatting
        "pydantic>=2",  # Command output schemas
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "mutmut>=3.4.0",  # Mutation testing
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "lizard",  # Cyclomatic complexity
        ],
    },
    entry_points={
        "console_scripts": [
            "diff-numerics=diff_numerics.cli:main",
        ],
    },
)
