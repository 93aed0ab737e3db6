import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="moac-rpc",
    version="0.1.0",
    description="Typed JSON-RPC client for MOAC nodes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        include=["moac_base_types*", "moac_exceptions*", "moac_rpc*", "cli*"],
        exclude=["*.tests", "*.tests.*"],
    ),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.1",
        "pydantic>=2.6",
        "requests>=2.31",
        "rich>=13.7",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
    entry_points={
        "console_scripts": [
            "moacrpc=cli.moacrpc:moacrpc",
        ],
    },
)
