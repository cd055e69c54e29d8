[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strutilkit"
version = "0.1.0"
description = "Small string transformation helpers with an interactive menu, plus a directory listing tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "text", "trim", "reverse", "case", "directory", "stat"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strutilkit-menu = "strutilkit.menu:main"
strutilkit-filestat = "strutilkit.filestat:main"

[tool.hatch.build.targets.wheel]
packages = ["strutilkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
