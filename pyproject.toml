[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kongadmin"
version = "0.1.0"
description = "A dependency-free client for the Kong Admin API: developers, developer roles, keys, key sets, licenses, GraphQL cost decorations, listeners and runtime information."
requires-python = ">=3.10"
dependencies = []
keywords = ["kong", "api-gateway", "admin-api", "rest", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kongadmin"]

[tool.pytest.ini_options]
addopts = "-ra"
