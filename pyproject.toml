[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridrogue"
version = "0.1.0"
description = "A small tile-based roguelike built on an entity-component-system core"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["roguelike", "ecs", "entity-component-system", "game", "tiles", "pygame"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridrogue = "gridrogue.application:main"

[tool.hatch.build.targets.wheel]
packages = ["gridrogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
