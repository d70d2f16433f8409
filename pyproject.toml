[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wsserve"
version = "0.1.0"
description = "A tiny HTTP server that answers HEAD and GET requests and performs the WebSocket opening handshake"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "websocket", "handshake"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
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
test = ["pytest"]

[project.scripts]
wsserve = "wsserve.server:main"

[tool.hatch.build.targets.wheel]
packages = ["wsserve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
