[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blogchain"
version = "0.1.0"
description = "State machine for a small blog chain: posts, params, genesis state and bech32 addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["blog", "bech32", "genesis", "key-value store", "state machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blogd = "blogchain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blogchain"]

[tool.pytest.ini_options]
addopts = "-ra"
