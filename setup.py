"""Setup script for envlist"""

from setuptools import setup, find_packages
from pathlib import Path

# Read version
version_file = Path(__file__).parent / "envlist" / "__version__.py"
version = {}
exec(version_file.read_text(), version)

# Read README
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="envlist",
    version=version["__version__"],
    description="Named deployment environments with synchronized APP_ENV / NODE_ENV",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="envlist Team",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "docs.*"]),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
