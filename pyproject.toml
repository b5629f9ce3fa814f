[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "decorator",
    "factory",
    "observer",
    "singleton",
    "strategy",
    "aggregation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-aggregation = "patternkit.aggregation:main"
patternkit-shapes = "patternkit.shapes:main"
patternkit-pizza = "patternkit.pizza:main"
patternkit-person-factory = "patternkit.person_factory:main"
patternkit-employee-factory = "patternkit.employee_factory:main"
patternkit-traffic = "patternkit.traffic:main"
patternkit-stock = "patternkit.stock:main"
patternkit-population = "patternkit.population:main"
patternkit-payments = "patternkit.payments:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
