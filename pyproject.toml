[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codedrills"
version = "0.1.0"
description = "Small classic algorithms: matrices, root-free Cholesky solving, least squares, MD5, palindromes, pi and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "matrix",
    "cholesky",
    "least-squares",
    "md5",
    "palindrome",
    "manacher",
    "pi",
    "exercises",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codedrills-palindrome = "codedrills.palindrome:main"
codedrills-pi = "codedrills.pi:main"
codedrills-idiom = "codedrills.idiom:main"

[tool.hatch.build.targets.wheel]
packages = ["codedrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
