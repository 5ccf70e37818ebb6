[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retos"
version = "0.1.0"
description = "Solutions to fourteen programming-contest exercises, as functions and as command-line filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["programming contest", "exercises", "algorithms", "dynamic programming", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
retos-years = "retos.years:main"
retos-kilometre = "retos.kilometre:main"
retos-christmas = "retos.christmas:main"
retos-pingpong = "retos.pingpong:main"
retos-table = "retos.table:main"
retos-photos = "retos.photos:main"
retos-lifespans = "retos.lifespans:main"
retos-trains = "retos.trains:main"
retos-decoding = "retos.decoding:main"
retos-cassette = "retos.cassette:main"
retos-circular = "retos.circular:main"
retos-pool = "retos.pool:main"
retos-traffic-lights = "retos.traffic_lights:main"
retos-restaurants = "retos.restaurants:main"

[tool.hatch.build.targets.wheel]
packages = ["retos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
