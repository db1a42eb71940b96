import os
from setuptools import setup, find_packages

with open(
    os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "keptn", "requirements.txt"
    )
) as f:
    requirements = f.read().splitlines()

setup(
    name="keptn-client",
    version="0.1.0",
    description="Python client for the Keptn api",
    packages=find_packages(include=["keptn", "keptn.*"]),
    package_data={"keptn": ["requirements.txt"]},
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "responses"],
    },
    entry_points={
        "console_scripts": [
            "keptn = keptn.cli:keptn",
        ],
    },
)
