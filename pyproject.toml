[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "piefedbridge"
version = "0.1.0"
description = "Lemmy API models, PieFed API client and converters from PieFed data to Lemmy's shape"
requires-python = ">=3.10"
keywords = ["lemmy", "piefed", "fediverse", "activitypub", "proxy", "api"]
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
    "Topic :: Internet :: Proxy Servers",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "pydantic>=2",
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["piefedbridge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
