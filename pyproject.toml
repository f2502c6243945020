[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tearsheet"
version = "0.1.0"
description = "Incremental trading statistics: Welford means and variances, drawdowns, Sharpe, Sortino and Calmar ratios, and text tear sheets."
requires-python = ">=3.10"
keywords = ["trading", "statistics", "drawdown", "sharpe", "sortino", "calmar", "backtesting", "welford"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "tabulate",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tearsheet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
