import os
from setuptools import setup, find_packages


def _requirements(path):
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), path)) as handle:
        lines = (line.split('#', 1)[0].strip() for line in handle)
        return [line for line in lines if line and not line.startswith('-')]


setup(
    name="dockerremote",
    version="0.2.0",
    license="MIT",
    description="Thin client for the Docker Engine Remote API",
    packages=find_packages(exclude=['tests']),
    install_requires=_requirements('requirements.txt'),
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
)
