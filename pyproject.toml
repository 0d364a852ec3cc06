[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatroom"
version = "0.1.0"
description = "A small multi-user TCP chat room server with channels and nicknames"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "tcp", "server", "chat-room"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chatroom = "chatroom.server:main"

[tool.hatch.build.targets.wheel]
packages = ["chatroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
