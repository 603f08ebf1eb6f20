[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huskarui"
version = "0.4.0"
description = "Design-token theme engine: colour palettes, font sizes, radii and expression-driven component themes."
requires-python = ">=3.10"
dependencies = []
keywords = ["theme", "design tokens", "color palette", "ui", "hashing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["huskarui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
