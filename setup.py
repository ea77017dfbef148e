from setuptools import setup, find_packages

setup(
    name="dirble",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich>=13.5.2",
        "pydantic>=2.3.0",
        "typer>=0.9.0",
        "click>=8.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dirble=dirble.__main__:app",
        ],
    },
    python_requires=">=3.8",
    author="Izzy Whistlecroft",
    description="Builds the scan configuration for a fast directory and file discovery tool",
)
