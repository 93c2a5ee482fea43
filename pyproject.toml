[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chaosworkshop"
version = "0.1.0"
description = "HTTP server core for a mod workshop: submissions, users, tokens and compressed submission listings"
requires-python = ">=3.10"
dependencies = [
    "zstandard",
]
keywords = ["workshop", "http", "server", "submissions", "mods", "sqlite", "zstd"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chaosworkshop = "chaosworkshop.server:main"

[tool.hatch.build.targets.wheel]
packages = ["chaosworkshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
