[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gestorecsv"
version = "1.0.0"
description = "Browse, filter, deduplicate and edit CSV rosters of students, courses and subjects"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "students", "courses", "roster", "deduplicate"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Italian",
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
gestorecsv = "gestorecsv.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["gestorecsv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
