[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svgchart"
version = "0.1.0"
description = "Generate simple SVG line and bar charts as strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "chart", "line chart", "bar chart", "plotting"]
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
    "Topic :: Multimedia :: Graphics :: Presentation",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["svgchart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
