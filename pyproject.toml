[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memcachedcrd"
version = "0.1.0"
description = "Data model, defaulting and validation for the Memcached custom resource of the memcached.openstack.org API group"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "operator", "memcached", "crd", "openstack", "webhook"]
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
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memcachedcrd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
