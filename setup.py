#!/usr/bin/env python
from setuptools import find_packages, setup

setup(
    name="psd-reader",
    version="0.1.0",
    description="Decoder for the binary structure of Adobe Photoshop PSD files",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=["attrs>=23.1.0"],
    extras_require={
        "test": ["pytest", "ipython"],
    },
    entry_points={
        "console_scripts": ["psd-reader=psd_reader.__main__:main"],
    },
)
