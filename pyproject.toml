[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitchess"
version = "0.1.0"
description = "Chess bitboard primitives: board geometry, sliding attacks, magic tables, a KPK bitbase and material imbalance"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic bitboards", "endgame", "bitbase"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bitchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
