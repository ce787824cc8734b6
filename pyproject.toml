[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "azapilsp"
version = "0.1.0"
description = "Language-server building blocks for azapi Terraform configurations: ranges, diagnostics, semantic tokens, sessions, completion candidates and hover content."
requires-python = ">=3.10"
dependencies = []
keywords = ["lsp", "language-server", "terraform", "hcl", "azapi", "completion", "diagnostics", "semantic-tokens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["azapilsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
