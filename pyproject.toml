[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dorga"
version = "0.1.0"
description = "A one-button arcade game: steer a spinning rocket through an endless field of stars and asteroids."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "procedural", "space"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dorga = "dorga.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dorga"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
