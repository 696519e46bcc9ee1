[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmplkit"
version = "0.1.0"
description = "Helpers for template tooling: terminal colors, regex substitutions, lorem ipsum, file discovery, script command lines and YAML data."
requires-python = ">=3.10"
keywords = ["template", "yaml", "regex", "substitution", "lorem", "glob", "shebang", "terraform"]
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
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tmplkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
