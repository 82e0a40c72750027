[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "khanij"
version = "1.1.0"
description = "Geology and mineralogy toolkit: unit cells and Bragg diffraction, radiometric dating, formula parsing, geochemistry, geothermal and glacier models"
requires-python = ">=3.10"
dependencies = []
keywords = ["geology", "minerals", "crystallography", "geochemistry", "dating", "glaciology"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["khanij"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
