[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cutetools"
version = "0.1.0"
description = "Everyday developer tools: hashing, number bases, gzip, HTML escaping, JSON/YAML conversion, lorem ipsum and more"
requires-python = ">=3.10"
keywords = [
    "toolbox",
    "hash",
    "gzip",
    "base64",
    "html",
    "json",
    "yaml",
    "lorem-ipsum",
    "desktop-entry",
    "number-bases",
    "image-conversion",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
    "pycryptodome",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cutetools = "cutetools.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cutetools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
