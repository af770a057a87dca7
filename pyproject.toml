[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examseating"
version = "4.2.0"
description = "Mixed seating plans for school exams: students, halls, desk layouts, variant patterns and the wizard steps that build them."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exam",
    "seating",
    "seating-plan",
    "school",
    "education",
    "hall-layout",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Turkish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["examseating"]

[tool.hatch.build.targets.sdist]
include = ["examseating", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
