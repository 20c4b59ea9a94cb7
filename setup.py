"""
Setup Configuration for cmdparams
=================================

Key Features:
- Core dependencies only (numpy, pyyaml)
- Development tooling as an extra (pip install cmdparams[dev])
- CLI entry point registration for the sample tool
"""

import sys
from pathlib import Path

from setuptools import find_packages, setup

# Get the directory containing setup.py
HERE = Path(__file__).parent.resolve()


# Read the long description from README
def read_readme():
    """Read README file for long description."""
    readme_path = HERE / "README.md"
    if readme_path.exists():
        return readme_path.read_text(encoding="utf-8")
    return "Declarative typed parameters with command-line, ini and XML descriptor support"


# Read version from cmdparams/__init__.py
def read_version():
    """Read version from package __init__.py."""
    init_path = HERE / "cmdparams" / "__init__.py"
    if init_path.exists():
        with open(init_path, encoding="utf-8") as f:
            for line in f:
                if line.startswith("__version__"):
                    return line.split("=")[1].strip().strip("\"'")
    return "1.0.0"


INSTALL_REQUIRES = [
    "numpy>=1.21.0",
    "pyyaml>=5.4.0",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=6.2.0",
        "pytest-cov>=2.12.0",
    ],
    "dev": [
        "pytest>=6.2.0",
        "pytest-cov>=2.12.0",
        "black>=21.0.0",
        "ruff>=0.0.290",
        "mypy>=0.910",
    ],
}

ENTRY_POINTS = {
    "console_scripts": [
        "cmdparams-demo=cmdparams.cli.main:main",
    ]
}

CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: User Interfaces",
    "License :: OSI Approved :: Apache Software License",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Operating System :: OS Independent",
]

KEYWORDS = [
    "command line", "parameters", "ini", "xml", "plugin descriptor", "cli",
]


def check_python_version():
    """Check if Python version is supported."""
    if sys.version_info < (3, 10):
        print("Python 3.10 or higher is required")
        print(f"   Current version: {sys.version}")
        sys.exit(1)


if __name__ == "__main__":
    check_python_version()

    setup(
        name="cmdparams",
        version=read_version(),
        description="Declarative typed parameters with command-line, ini and XML descriptor support",
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        author="cmdparams developers",
        packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        python_requires=">=3.10",
        entry_points=ENTRY_POINTS,
        classifiers=CLASSIFIERS,
        keywords=KEYWORDS,
        license="Apache-2.0",
        zip_safe=False,
    )
