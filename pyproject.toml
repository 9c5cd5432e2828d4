[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logworks"
version = "0.1.0"
description = "Building blocks for asynchronous logging: a thread-safe queue, an active-object worker, log file naming helpers, throughput measurement and test helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logging",
    "asynchronous",
    "active object",
    "queue",
    "threading",
    "log file",
    "benchmark",
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logworks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
