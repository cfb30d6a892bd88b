from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="odmatrix",
    version="0.1.0",
    author="odmatrix contributors",
    description="Dense CSV cost matrices from solved origin-destination cost matrix layers.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"odmatrix.schemas": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pandas",
        "PyYAML",
        "jsonschema",
    ],
    extras_require={"test": ["pytest", "networkx"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["odmatrix=odmatrix.cli:main"]},
)
