[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printlog"
version = "0.1.0"
description = "Small library for printing text to streams and appending words to a log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["print", "log", "stream", "text"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
printlog-demo = "printlog.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["printlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
