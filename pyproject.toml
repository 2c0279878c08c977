[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanegame"
version = "0.1.0"
description = "A small 2D entity and state-machine game framework with a lane-defence scene"
requires-python = ">=3.10"
keywords = ["game", "pygame", "state-machine", "lane-defence", "entities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lanegame = "lanegame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lanegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
