[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lager"
version = "0.1.0"
description = "Reactive value nodes, cursors and lenses, with a small reducer-driven counter application"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "reactive",
    "cursor",
    "lens",
    "state management",
    "unidirectional data flow",
    "reducer",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lager-counter = "lager.counter:main"

[tool.hatch.build.targets.wheel]
packages = ["lager"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
