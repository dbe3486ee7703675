[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigbool"
version = "0.1.0"
description = "Fixed-length boolean vectors with bitwise logic, shifts and rotations"
requires-python = ">=3.10"
dependencies = []
keywords = ["bit vector", "boolean", "bitwise", "shift", "rotate"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
bigbool-selfcheck = "bigbool.selfcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["bigbool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
