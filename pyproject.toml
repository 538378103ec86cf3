[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mctgbot"
version = "0.1.0"
description = "Telegram bot and event types for relaying chat between a Minecraft server and a Telegram group"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "telegram", "bot", "chat", "bridge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mctgbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
