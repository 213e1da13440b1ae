# setup.py
from setuptools import setup, find_packages

setup(
    name="swarm_ssp",
    version="0.1.0",
    description="Solve subset-sum instances with a swarm of concurrent QUBO agents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.25",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "swarm-ssp = swarm_ssp.cli:main",
        ],
    },
)
