"""Build script for datedisplay."""

import setuptools

setuptools.setup(
    name="datedisplay",
    version="1.0.0",
    description="Human-friendly display of dates, date ranges and durations.",
    packages=setuptools.find_packages(exclude=["tests"]),
    python_requires=">=3.10",
    install_requires=[
        "attrs",
        "numpy",
        "pandas",
        "typing_extensions"],
    extras_require={
        "test": ["pytest"]})
