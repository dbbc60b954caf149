[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mermaidgame"
version = "0.1.0"
description = "A small underwater arcade game: steer a mermaid, collect shells and flowers, dodge killer fish."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "mermaid"]
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
mermaidgame = "mermaidgame.main:main"

[tool.hatch.build.targets.wheel]
packages = ["mermaidgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
