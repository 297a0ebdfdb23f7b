from setuptools import setup, find_packages

setup(
    name="fourinrow",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # Environment adapter in fourinrow.game.env
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
