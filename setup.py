# setup.py
from setuptools import setup, find_packages

setup(
    name="gmath",
    version="1.0.0",
    description="Vector and matrix primitives for 3D rendering",
    packages=find_packages(include=["gmath", "gmath.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
