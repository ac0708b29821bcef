[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wsclient"
version = "0.1.0"
description = "Building blocks for a WebSocket client: errors, logging, buffers, hashing, encoding and timing utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["websocket", "rfc6455", "sha1", "base64", "utf-8", "circular-buffer", "logging"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wsclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
