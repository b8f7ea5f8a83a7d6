[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "softraster"
version = "0.1.0"
description = "A pure-Python software rasterizer: meshes, cameras, lights, clipping and a depth-buffered framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "3d", "rendering", "software-rendering", "wavefront-obj", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["softraster*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
