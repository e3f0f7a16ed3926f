[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dezsh"
version = "0.1.0"
description = "A small interactive Unix shell with builtins, pipes and variable expansion"
requires-python = ">=3.10"
keywords = ["shell", "repl", "command-line", "pipes", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dezsh = "dezsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["dezsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
