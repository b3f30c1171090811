[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricsvc"
version = "0.1.0"
description = "A small HTTP service for registering metrics and recording their readings"
requires-python = ">=3.10"
keywords = ["metrics", "http", "asgi", "starlette", "readings", "uuid7"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
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
dependencies = [
    "starlette",
    "uvicorn",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "httpx",
]

[project.scripts]
metricsvc = "metricsvc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["metricsvc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
