[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tryluck"
version = "0.2.0"
description = "Randomized tarot, dice and coin results for storytelling and tabletop role-playing, from the command line or an MCP server."
requires-python = ">=3.10"
dependencies = []
keywords = ["mcp", "cli", "random", "tarot", "dice", "coin", "trpg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tryluck = "tryluck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tryluck"]

[tool.pytest.ini_options]
addopts = "-ra"
