"""
Setup script for dependency-resolver package.
"""

from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dependency-resolver",
    version="1.0.0",
    author="Dependency Resolver Contributors",
    description="Transitive library dependency resolver",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/your-org/dependency-resolver",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Software Development :: Build Tools",
    ],
    python_requires=">=3.10",
    install_requires=[
        "networkx>=3.0",
        "tabulate>=0.9.0",
        "colorama>=0.4.6",  # Colored output
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "mypy",
            "black",
            "ruff",
        ],
    },
    entry_points={
        "console_scripts": [
            "dependency-resolver=dependency_resolver.cli:main",
        ],
    },
)
