[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskdemos"
version = "0.4.0"
description = "Small desktop programs: a hello window, an alarm clock, a contacts list and a CSV-backed address book"
requires-python = ">=3.10"
dependencies = []
keywords = ["address book", "contacts", "alarm clock", "desktop", "csv", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Address Book",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskdemos-hello = "deskdemos.hello:main"
deskdemos-alarm = "deskdemos.alarm:main"
deskdemos-contacts = "deskdemos.contacts_view:main"
deskdemos-addressbook = "deskdemos.addressbook:main"

[tool.hatch.build.targets.wheel]
packages = ["deskdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
