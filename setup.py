from setuptools import setup, find_packages

setup(
    name="quadpress",
    version="0.1.0",
    description="Quadtree image compression with tolerance pruning and in-place rotation",
    author="Andrew Luetgers",
    packages=find_packages(exclude=["tests", "examples"]),
    install_requires=[
        "numpy>=1.21.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.7",
)
