[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricslib"
version = "0.1.0"
description = "Thread-safe in-process metrics with periodic aggregation to a log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "monitoring", "aggregation", "queue", "stack", "intrusive-list"]
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
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricslib-demo = "metricslib.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["metricslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
