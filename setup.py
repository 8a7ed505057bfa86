from setuptools import setup

import m64edit.config as config

setup(
    name="m64edit",
    version=config.version_str("."),
    description="Reader and writer for M64 TAS movie files",
    packages=["m64edit"],
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
