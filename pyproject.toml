[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgo"
version = "0.1.0"
description = "Classic algorithms: graphs, matrices, convex hulls, search and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "minimum spanning tree",
    "max flow",
    "shortest path",
    "vertex cover",
    "convex hull",
    "strassen",
    "matrix chain",
    "rabin-karp",
    "subset sum",
    "sorting",
    "a-star",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["classicalgo"]

[tool.hatch.build.targets.sdist]
include = ["classicalgo", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
