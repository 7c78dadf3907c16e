# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="beef_spv",
    version="0.1.0",
    packages=find_namespace_packages(include=["beef_spv*"]),
    install_requires=[
        "bsv-sdk",            # transactions, hashing, script interpreter
        "msgpack",            # merkle root tables
        "requests",           # merkle root oracle client
        "prometheus_client",  # metrics
        "psutil",             # monitoring
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
