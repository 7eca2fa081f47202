from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pynoisegraph",
    version="0.1.0",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Deterministic 3D coherent noise built from composable module graphs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pynoisegraph", "pynoisegraph.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Multimedia :: Graphics",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "click>=7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="noise perlin billow procedural terrain coherent-noise",
    entry_points={
        "console_scripts": [
            "noisegraph-value=pynoisegraph.cli.noise_commands:noise_value",
            "noisegraph-sample=pynoisegraph.cli.noise_commands:noise_sample",
        ],
    },
)
