[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xaio"
version = "0.1.0"
description = "Discover x.com GraphQL operations and generate client transaction IDs"
requires-python = ">=3.10"
keywords = ["x.com", "graphql", "scraping", "transaction-id", "http"]
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
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
xaio-operations = "xaio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xaio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
