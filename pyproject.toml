[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kkeditcore"
version = "0.1.0"
description = "Text editor core helpers: string utilities, a directory finder, external tool definitions, documentation token search, menu registry and file handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "tools", "doxygen", "desktop-file", "hexdump"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kkeditcore"]

[tool.pytest.ini_options]
addopts = "-ra"
