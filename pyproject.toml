[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon_crawler"
version = "0.1.0"
description = "A small turn-based terminal dungeon crawler with walls, floors and paired portals"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "roguelike", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeon-crawler = "dungeon_crawler.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon_crawler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
