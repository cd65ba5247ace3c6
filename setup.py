import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pathsym",
    version="0.1.0",
    author="pathsym contributors",
    description="Generic A* path search over caller-defined graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["pathsym", "pathsym.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "frozendict>=2.3.8",
        "numpy>=1.24",
    ],
    extras_require={
        "test": [
            "parameterized",
            "pytest",
        ],
        "docs": [
            "sphinx",
            "sphinx_rtd_theme",
        ],
    },
)
