from setuptools import setup, find_namespace_packages

setup(
    name="books",
    version="0.1.0",
    description="Keep track of the books you read",
    packages=find_namespace_packages(include=['books*']),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "Click>=8.0",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "books=books.cli.main:main",
        ],
    },
)
