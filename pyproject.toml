[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "htspkit"
version = "0.1.0"
description = "Data model for Tvheadend HTSP clients: channels, tags, EPG events, recordings, timers and stream status"
requires-python = ">=3.10"
dependencies = []
keywords = ["tvheadend", "htsp", "pvr", "epg", "dvr", "television"]
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
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["htspkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
