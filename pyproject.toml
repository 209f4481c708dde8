[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodgefall"
version = "0.1.0"
description = "A small arcade game: dodge the falling platforms for as long as you can."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "dodge", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
dodgefall = "dodgefall.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dodgefall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
