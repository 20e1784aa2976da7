import os

from setuptools import find_packages, setup


# read the version from the VERSION file
def get_version():
    with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
        return version_file.read().strip()


# Set the version in the awsclients/version.py file
def set_version_constant(version: str):
    with open(
        os.path.join(os.path.dirname(__file__), "awsclients", "version.py"), "w"
    ) as version_file:
        version_file.write(f'__version__ = "{version}"\n')


version = get_version()
set_version_constant(version)

setup(
    name="awsclients",
    version=version,
    description="Generated clients of AWS services built on botocore",
    packages=find_packages(include=["awsclients", "awsclients.*"]),
    package_data={"awsclients.aws": ["spec-patches.json"]},
    python_requires=">=3.11",
    install_requires=[
        "boto3>=1.34,<2.0",
        "botocore>=1.34,<2.0",
        "click>=7.1",
        "jsonpatch>=1.24",
    ],
    extras_require={
        "dev": [
            "pypandoc",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "awsclients-scaffold=awsclients.aws.scaffold:scaffold",
        ],
    },
)
