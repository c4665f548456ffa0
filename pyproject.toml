[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trashdodge"
version = "0.1.0"
description = "A top-down driving game: steer your car down a scrolling road and dodge the trash bags."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "driving", "pygame", "top-down"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
trashdodge = "trashdodge.game:main"

[tool.hatch.build.targets.wheel]
packages = ["trashdodge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
