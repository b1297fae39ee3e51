[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satzlern"
version = "0.1.0"
description = "SQLite storage for German/Spanish sentence and vocabulary practice with spaced-repetition review data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "german",
    "spanish",
    "vocabulary",
    "sentences",
    "spaced-repetition",
    "sqlite",
    "language-learning",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: German",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["satzlern"]

[tool.pytest.ini_options]
addopts = "-ra"
