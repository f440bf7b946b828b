[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megastore"
version = "0.1.0"
description = "Product catalogue search with category and brand filters and simple recommendations"
requires-python = ">=3.10"
dependencies = []
keywords = ["catalogue", "products", "search", "recommendations", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
megastore = "megastore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["megastore"]

[tool.pytest.ini_options]
addopts = "-ra"
