[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable demonstrations of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "strategy", "observer", "decorator", "factory", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
patternkit-strategy = "patternkit.strategy:main"
patternkit-observer = "patternkit.observer:main"
patternkit-decorator = "patternkit.decorator:main"
patternkit-simple-factory = "patternkit.simple_factory:main"
patternkit-factory-method = "patternkit.factory_method:main"
patternkit-abstract-factory = "patternkit.abstract_factory:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
