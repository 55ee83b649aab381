"""
Setup script for the UDP Password Generator package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="udp-password-generator",
    version="0.1.0",
    author="UDP Passgen Team",
    author_email="example@example.com",
    description="Password generator served over UDP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/udp-password-generator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.7",
    install_requires=[
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "udp-passgen=udp_passgen.cli:main",
        ],
    },
)
