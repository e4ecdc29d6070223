[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webbrt"
version = "3.0.0"
description = "Runtime building blocks: byte decoding, ordered sets, data providers, prices, transactional storage and chain configuration values"
requires-python = ">=3.10"
dependencies = []
keywords = ["runtime", "blockchain", "storage", "transactions", "median", "ordered-set", "fixed-point"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["webbrt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
