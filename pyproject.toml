[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wheelcore"
version = "1.0.0"
description = "Core logic for a radial item-wheel menu: settings, time-based interpolators, key binding and input filtering, icon lookup and save records."
requires-python = ">=3.10"
dependencies = []
keywords = ["wheel", "radial-menu", "interpolation", "input", "game", "hud"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wheelcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
