[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listkit"
version = "0.1.0"
description = "Array lists, singly, doubly and circular linked lists, polynomials and simple sorts, with a student-record toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "doubly-linked-list",
    "circular-list",
    "array-list",
    "polynomial",
    "sorting",
    "data-structures",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listkit-students = "listkit.array_list:main"
listkit-linked-students = "listkit.linked_list:main"
listkit-polynomial = "listkit.polynomial:main"
listkit-circular = "listkit.circular_list:main"
listkit-doubly = "listkit.doubly_linked_list:main"
listkit-sort-timing = "listkit.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["listkit"]

[tool.hatch.build.targets.sdist]
include = ["listkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
