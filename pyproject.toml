[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitcraft"
version = "0.1.0"
description = "Bit-level tools for two's complement arithmetic, IEEE 754 floats and BMP image cutting"
requires-python = ">=3.10"
dependencies = []
keywords = ["twos-complement", "booth", "ieee754", "float", "bitmap", "bmp", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
bitcraft-twos = "bitcraft.twos_complement:main"
bitcraft-arith = "bitcraft.bitarith:main"
bitcraft-float = "bitcraft.floatbits:main"
bitcraft-casts = "bitcraft.floatcasts:main"
cutbmp = "bitcraft.cutbmp:main"

[tool.hatch.build.targets.wheel]
packages = ["bitcraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
