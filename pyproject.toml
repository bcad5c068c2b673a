[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flappydoge"
version = "0.1.0"
description = "A Flappy Bird style arcade game starring a Shiba Inu, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "flappy", "pygame", "doge"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flappydoge = "flappydoge.main:main"

[tool.hatch.build.targets.wheel]
packages = ["flappydoge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
