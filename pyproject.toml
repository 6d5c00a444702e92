[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codevalidators"
version = "1.0.0"
description = "Validation of EU VAT numbers and postal codes against country formats and checksums."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "validation",
    "vat",
    "eu-vat",
    "vies",
    "postal-code",
    "zip-code",
    "checksum",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["codevalidators"]

[tool.hatch.build.targets.sdist]
include = ["codevalidators", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
