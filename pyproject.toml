[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maildecode"
version = "0.1.0"
description = "Lenient decoders for e-mail content: base64 bodies and words, percent escapes, UTF-7/16 and legacy character sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["email", "mime", "base64", "charset", "utf-7", "utf-16", "decoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maildecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
