# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="webbash",
    version="1.0.0",
    description="Simulated shell over an in-memory directory tree, with terminal and window hosts",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["webbash", "webbash.*"]),
    package_data={
        "webbash.interface.locales": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Window host (webbash with no arguments)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'webbash=webbash.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
