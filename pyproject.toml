[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocbox"
version = "0.1.0"
description = "Small worked examples (wallet, dictionary, shapes, countdown, website checker, HTTP racer, greeter server) and a Kafka-style producer/consumer toolkit with a Flask front end."
requires-python = ">=3.10"
keywords = ["examples", "tdd", "kafka", "consumer", "flask", "concurrency"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]
dependencies = [
    "flask",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pocbox-greeter = "pocbox.tdd.greeter:main"
pocbox-countdown = "pocbox.tdd.countdown:main"

[tool.hatch.build.targets.wheel]
packages = ["pocbox"]

[tool.hatch.build.targets.sdist]
include = ["pocbox", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
