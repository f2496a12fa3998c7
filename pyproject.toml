[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gogox"
version = "0.1.0"
description = "Building blocks for services: structured errors, an immutable request context carrying log metadata and trace IDs, cache and stats interfaces, trace-propagating WSGI middleware and gRPC-style interceptors, and small sequence helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "errors",
    "context",
    "tracing",
    "middleware",
    "cache",
    "metrics",
    "wsgi",
    "grpc",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gogox"]

[tool.hatch.build.targets.sdist]
include = [
    "gogox",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
