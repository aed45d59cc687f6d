[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moodengine"
version = "1.0.0"
description = "Reaction, mood and personality engine for companion robots, with helpers for touch input, user records, peer messages and a generative-language client"
requires-python = ">=3.10"
dependencies = []
keywords = ["robot", "mood", "personality", "reaction", "emotion", "moving-average"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moodengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
