[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astrelis"
version = "0.0.1"
description = "Core building blocks for a layered application engine: results, geometry, timing, vector math, logging, files, images and layer stacks."
requires-python = ">=3.10"
keywords = ["engine", "application-framework", "layers", "geometry", "logging"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["astrelis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
