[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustdrill"
version = "5.2.1"
description = "Helpers for a programming-exercise course: coloured status lines, rust-project.json generation and worked exercise solutions"
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = ["exercises", "learning", "education", "rust-analyzer", "rust-project.json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rustdrill"]

[tool.hatch.build.targets.sdist]
include = ["rustdrill", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
