from setuptools import setup, find_packages

setup(
    name="bookshelf",
    version="1.0.0",
    description="In-memory book catalog with swappable storage backends",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'bookshelf=bookshelf.cli:app',
        ],
    },
)
