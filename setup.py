# setup.py - Package build
from setuptools import setup

setup(
    name="diagram_chaser",
    version="0.1.0",
    packages=["diagram_chaser"],
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
