[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coherentnoise"
version = "0.3.0"
description = "Coherent-noise generation with composable noise modules: gradient and value noise, ridged multifractal, spheres, Voronoi cells, point transforms, selection and terraces."
requires-python = ">=3.10"
dependencies = []
keywords = ["noise", "coherent-noise", "gradient-noise", "procedural", "terrain", "voronoi", "multifractal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coherentnoise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
