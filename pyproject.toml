[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saba"
version = "0.1.0"
description = "Core of a small toy web browser: URL and HTTP parsing, a DOM tree, computed styles and a tiny JavaScript interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["browser", "dom", "javascript", "interpreter", "http", "url", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["saba"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
