from setuptools import find_packages, setup

setup(
    name="guestwatch",
    version="0.1.0",
    description="Replay host file modifications inside a Lima guest as touch hints",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "watchdog",  # File system monitoring
        "pydantic>=2",  # Configuration models
        "typer<0.26",  # CLI (>=0.26 vendors its own click; code relies on the real click package)
        "click",  # CLI context access
        "rich",  # Terminal formatting
        "PyYAML",  # lima.yaml parsing and YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "gwatch=guestwatch.cli:main",
        ],
    },
)
