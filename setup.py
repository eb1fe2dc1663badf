from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).absolute().parent
README = open(HERE / "README.md", encoding="utf8").read()

setup(
    name="either-result",
    version="0.0.1b0",
    long_description=README,
    long_description_content_type="text/markdown",
    description="Either and Result types with conversions between them",
    license="Apache-2.0",
    packages=find_packages(exclude=["either.tests"]),
    include_package_data=True,
    zip_safe=True,
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "dev": [
            "black",
            "coverage",
            "flake8",
            "isort",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries",
    ],
)
