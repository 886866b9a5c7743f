[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odpsite"
version = "0.1.0"
description = "HTML pages, a WSGI app and a static-site builder for the Open Device Partnership website"
requires-python = ">=3.10"
keywords = ["website", "wsgi", "static-site", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
odpsite = "odpsite.app:main"

[tool.hatch.build.targets.wheel]
packages = ["odpsite"]

[tool.pytest.ini_options]
addopts = "-ra"
