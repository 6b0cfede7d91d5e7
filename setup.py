"""Setup configuration for Modcase Discord Bot."""

from setuptools import setup, find_packages

setup(
    name="modcase",
    version="0.1.0",
    description="A Discord moderation bot with logged kick cases and moderation notes",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "py-cord>=2.4",
        "aiosqlite>=0.19",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "modcase=modcase.main:main",
        ],
    },
)
