from setuptools import setup, find_packages
import os

here = os.path.dirname(__file__)

with open(os.path.join(here, "README.md"), "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open(os.path.join(here, "requirements.txt"), "r", encoding="utf-8") as f:
    requirements = [
        line.split("#")[0].strip()
        for line in f
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="taskcal",
    version="1.0.0",
    description="Task Calendar CLI - calendar view, recurring forecasts and iCal export for task exports",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.1.3",
            "pytest-mock>=3.10.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "taskcal=taskcal.taskcal:app",
        ],
    },
)
