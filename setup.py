import os

from setuptools import find_packages, setup

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def read(fname):
    return open(os.path.join(ROOT_DIR, fname)).read()


with open(os.path.join(ROOT_DIR, "requirements.txt")) as reqs:
    requirements = [line.strip().split("==")[0] for line in reqs.readlines() if line.strip()]

setup(
    name="cpmsched",
    version="0.1",
    author="cpmsched team",
    description="Critical Path Method scheduling of dependent tasks",
    license="MIT",
    keywords="scheduling, critical path, cpm",
    packages=find_packages(include=["cpmsched", "cpmsched.*"]),
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["cpmsched = cpmsched.cli:main"]},
    python_requires=">=3.6",
    long_description=read("README.md"),
)
