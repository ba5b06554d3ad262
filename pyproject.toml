[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopatterns"
version = "0.1.0"
description = "Classic algorithm patterns as small Python functions: lists, BFS, fast and slow pointers, intervals, sliding windows, sorting, subsets, recursion and concurrency demos."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "interview",
    "sliding-window",
    "two-pointers",
    "bfs",
    "intervals",
    "subsets",
    "permutations",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algopatterns = "algopatterns.cli:main"
algopatterns-concurrency = "algopatterns.concurrency:main"

[tool.hatch.build.targets.wheel]
packages = ["algopatterns"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
