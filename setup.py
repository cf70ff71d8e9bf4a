from setuptools import setup, find_packages

setup(
    name="textops",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "structlog",
        "PyYAML",
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "textops=textops.core.cli:main",
        ],
    },
    description="Argument-line tokenizing, string cleanup and colored console output helpers.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
