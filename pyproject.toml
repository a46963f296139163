[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nattojump"
version = "0.1.0"
description = "A small 2D arcade game on pygame: natto stirring, falling, bungee jumping and swinging on a shot string."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "2d", "side-scrolling"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nattojump = "nattojump.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nattojump"]

[tool.pytest.ini_options]
addopts = "-ra"
