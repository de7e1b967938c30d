"""Packaging for BoxingTimer.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle of the console runner:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import find_packages, setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "BoxingTimer",
        "CFBundleDisplayName": "BoxingTimer",
        "CFBundleIdentifier": "com.boxingtimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "LSMinimumSystemVersion": "13.0",
    },
}

py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = dict(
        app=APP,
        data_files=DATA_FILES,
        options={"py2app": OPTIONS},
        setup_requires=["py2app"],
    )

setup(
    name="BoxingTimer",
    version="0.1.0",
    description="Round/rest interval timer for boxing workouts",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "SQLAlchemy>=2.0",
        "loguru>=0.7",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["boxingtimer=boxingtimer.__main__:main"],
    },
    **py2app_kwargs,
)
