import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="web3-rpc-bindings",
    version="0.1.0",
    description="Typed client bindings for the Ethereum JSON-RPC interface",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=setuptools.find_packages(include=["web3_*"]),
    install_requires=[
        "pydantic>=2.10,<3",
        "requests>=2.31",
        "PyYAML>=6.0",
        "websockets>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
)
