from setuptools import setup, find_packages

setup(
    name="pymi",
    version="0.0.1",
    packages=find_packages(include=["pymi", "pymi.*"]),
    description="Discretization, joint states and probability estimation for mutual information",
    license="MIT",
    install_requires=[
        "pytest",
        "numpy",
    ],
)
