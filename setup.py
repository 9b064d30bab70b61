from setuptools import setup, find_packages

setup(
    name="quadrax",
    version="0.1.0",
    packages=find_packages(include=["quadrax", "quadrax.*"]),
    python_requires=">=3.8",
    install_requires=[
        "gymnasium>=0.29.0",
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
