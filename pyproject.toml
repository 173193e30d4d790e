[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tixcron"
version = "0.1.0"
description = "Scheduled job that expires unpaid travel bookings and cancels their flight reservations"
requires-python = ">=3.10"
keywords = ["cron", "scheduler", "booking", "expiry", "transactions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "sqlalchemy>=2.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
tixcron = "tixcron.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tixcron"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
