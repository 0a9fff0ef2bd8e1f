[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smppkit"
version = "0.1.0"
description = "SMPP data codings, GSM 7-bit alphabet and packing, command identifiers and status codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["smpp", "sms", "gsm", "gsm7", "ucs2", "telephony"]
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
    "Topic :: Communications :: Telephony",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["smppkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
