[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkinglot"
version = "0.1.0"
description = "Multi-floor parking lot management: check-in, hourly billing, revenue and history"
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "parking-lot", "billing", "revenue", "license-plate"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Vietnamese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parkinglot = "parkinglot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parkinglot"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
