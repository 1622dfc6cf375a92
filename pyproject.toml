[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexi"
version = "1.0.0"
description = "Binary buffers, file buffers, endian conversion, varints and block allocation"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary", "buffer", "endian", "varint", "allocator", "file"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexi"]

[tool.pytest.ini_options]
addopts = "-ra"
