[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cnettools"
version = "1.0.0"
description = "Command-line tools and a library for complex network analysis and modelling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "complex networks",
    "graph",
    "network analysis",
    "degree correlations",
    "spanning tree",
    "power law",
    "random graphs",
    "preferential attachment",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cnet-deg-seq = "cnettools.graph:deg_seq_main"
cnet-deg-seq-w = "cnettools.graph:deg_seq_w_main"
cnet-graph-info = "cnettools.graph:graph_info_main"
cnet-dms = "cnettools.dms:main"
cnet-hv-net = "cnettools.hidden:main"
cnet-knn = "cnettools.knn:main"
cnet-knn-w = "cnettools.knn_w:main"
cnet-er-b = "cnettools.er:main"
cnet-kruskal = "cnettools.kruskal:main"
cnet-fitmle = "cnettools.fitmle:main"

[tool.hatch.build.targets.wheel]
packages = ["cnettools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
