from setuptools import setup, find_packages
import pathlib

# Detect layout
use_src = pathlib.Path("src/xmltab").exists()
pkg_args = {"package_dir": {"": "src"}, "packages": find_packages(where="src")} if use_src \
           else {"packages": find_packages(where=".")}

setup(
    name="xml-tabulate",
    version="0.1.0",
    description="Extract CSV rows from XML documents using dotted path expressions",
    python_requires=">=3.8",
    include_package_data=True,
    package_data={"xmltab": ["data/*.json"]},
    install_requires=[
        "typer>=0.9",
        "pydantic>=2",
        "PyYAML>=6",
        "lxml>=4.9",
    ],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["xmltab=xmltab.cli:app"]},
    **pkg_args
)
