[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "u2fauth"
version = "0.1.0"
description = "U2F security key building blocks: HID report descriptor parsing, hidraw and uhid device access, one-shot callbacks and register response helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["u2f", "fido", "hid", "hidraw", "uhid", "security-key", "report-descriptor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: POSIX :: BSD :: NetBSD",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["u2fauth"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
