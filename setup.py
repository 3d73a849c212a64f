from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("revealz", "./src/revealz/__init__.py")
revealz = ModuleType(loader.name)
loader.exec_module(revealz)

setup(
    name="revealz",
    version=revealz.__version__,  # type: ignore
    description="Tool to assemble reveal.js decks with highlighted code excerpts.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.12",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    package_data={"revealz": ["templates/*.j2"]},
    entry_points={"console_scripts": ["revealz=revealz.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts>=3",
        "Jinja2",
        "MarkupSafe",
        "pydantic>=2.5",
        "PyYAML",
        "rich",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
    ],
)
