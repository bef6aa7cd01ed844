[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gengo"
version = "0.1.0"
description = "Building blocks for Go code generators: a type model, naming systems, ordering, import tracking and comment tags."
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "go", "golang", "namer", "imports"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gengo"]

[tool.pytest.ini_options]
addopts = "-ra"
