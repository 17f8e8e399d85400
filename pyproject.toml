[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixlang"
version = "0.1.0"
description = "A small language for pixel art: lexer, evaluator, shape conditions, image export and editor completion"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "pixel-art",
    "language",
    "lexer",
    "evaluator",
    "png",
    "svg",
    "gif",
    "language-server",
    "completion",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixlang-server = "pixlang.server:main"

[tool.hatch.build.targets.wheel]
packages = ["pixlang"]

[tool.hatch.build.targets.sdist]
include = [
    "pixlang",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
