[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketbook"
version = "0.1.0"
description = "A small interactive phonebook, a text case converter and a toy car demo."
requires-python = ">=3.10"
keywords = ["phonebook", "contacts", "cli", "case-conversion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Utilities",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pocketbook = "pocketbook.shell:main"
pocketbook-convert = "pocketbook.convert:main"
pocketbook-car = "pocketbook.car:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketbook"]

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
