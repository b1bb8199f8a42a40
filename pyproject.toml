[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortlab"
version = "0.1.0"
description = "Array helpers, counted binary searches and small record-processing exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "arrays",
    "binary search",
    "matrix traversal",
    "phone directory",
    "binary search tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortlab-records = "sortlab.records:main"
sortlab-basics = "sortlab.basics:main"
sortlab-phonebook = "sortlab.phonebook:main"
sortlab-words = "sortlab.words:main"
sortlab-passengers = "sortlab.passengers:main"

[tool.hatch.build.targets.wheel]
packages = ["sortlab"]

[tool.hatch.build.targets.sdist]
include = ["sortlab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
