[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtsgame"
version = "0.1.0"
description = "A small real-time strategy game prototype with 2D and 3D cameras, OBJ model loading and an OpenGL renderer"
requires-python = ">=3.10"
keywords = ["game", "rts", "opengl", "camera", "obj", "pyglet"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rtsgame = "rtsgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rtsgame"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
