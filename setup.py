from setuptools import find_packages, setup

setup(
    name="linediff",
    version="0.1.0",
    description="Line-oriented diff engine with unified diff output",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",  # Terminal formatting
        "typer<0.26",  # CLI framework (last line of releases built on click)
        "click",  # Imported directly by the CLI
        "pydantic>=2",  # Config validation
        "pyyaml",  # YAML display output
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
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linediff=linediff.cli:main",
        ],
    },
)
