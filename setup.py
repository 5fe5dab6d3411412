from setuptools import setup, find_packages

setup(
    name="autofix",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    description="Merges rule-proposed text edits into a single conflict-free rewrite.",
)
