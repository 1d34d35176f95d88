from setuptools import find_packages, setup

setup(
    name="fortuna-generator",
    version="0.1.0",
    description="Fortuna cryptographic pseudo-random generator",
    packages=find_packages(include=["fortuna", "fortuna.*"]),
    python_requires=">=3.10",
    install_requires=[
        "cryptography>=46",
        "numpy",
        "tracerite",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["fortuna = fortuna.cli:main"],
    },
)
