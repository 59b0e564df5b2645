[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routesim"
version = "0.1.0"
description = "Small routing protocol simulator: OSPF, RIP, EIGRP and BGP routing tables from a text topology"
requires-python = ">=3.10"
dependencies = []
keywords = ["routing", "ospf", "rip", "eigrp", "bgp", "network", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
routesim = "routesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["routesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
