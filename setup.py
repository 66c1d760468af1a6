import os
from setuptools import setup, find_packages


PACKAGENAME = "truncdens"
__version__ = None
pth = os.path.join(
    os.path.dirname(os.path.realpath(__file__)), "truncdens", "_version.py"
)
with open(pth, "r") as fp:
    exec(fp.read())


setup(
    name=PACKAGENAME,
    version=__version__,
    description="Renormalized density curves for truncated normal samples",
    long_description="Renormalized density curves for truncated normal samples",
    install_requires=["numpy", "jax"],
    extras_require={"test": ["pytest", "matplotlib"]},
    packages=find_packages(include=["truncdens", "truncdens.*"]),
)
