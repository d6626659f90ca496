from setuptools import setup, find_packages

setup(
    name="habitforecast",
    version="0.1.0",
    description="Forecast the damage a Habitica character takes at the next cron.",
    author="vainilie",
    url="https://github.com/vainilie/pixabit",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "rich",
        "python-dateutil",
        "emoji-data-python",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "habitforecast=habitforecast.__main__:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
