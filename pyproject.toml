[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slowmokit"
version = "0.1.0"
description = "Small, readable machine-learning toolkit: clustering, regression, naive Bayes, KNN, metrics and preprocessing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "machine-learning",
    "kmeans",
    "linear-regression",
    "naive-bayes",
    "knn",
    "metrics",
    "preprocessing",
    "matrix",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slowmokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
