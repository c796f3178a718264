[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlblog"
version = "0.1.0"
description = "In-memory blog backend with users, posts, comments, field resolvers and live subscriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "resolver", "blog", "subscriptions", "in-memory", "pubsub"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gqlblog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
