[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maksehat"
version = "0.1.0"
description = "Interactive mental-health self-assessment questionnaire for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["mental health", "self-assessment", "questionnaire", "likert", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
maksehat = "maksehat.main:main"

[tool.hatch.build.targets.wheel]
packages = ["maksehat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
