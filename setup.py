import os

from setuptools import find_namespace_packages, setup

# We use the README as the long_description
readme_path = os.path.join(os.path.dirname(__file__), "README.rst")
with open(readme_path) as fp:
    long_description = fp.read()

setup(
    name="pixelflip",
    version="0.1",
    author="The pixelflip authors",
    description="Image loading, flipping and mirroring from the command line",
    long_description=long_description,
    license="BSD",
    zip_safe=False,
    packages=find_namespace_packages(include=["pixelflip", "pixelflip.*"]),
    include_package_data=True,
    install_requires=[
        "click>=7.0",
        "numpy>=1.16",
        "Pillow>=9.1",
    ],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["pixelflip = pixelflip.cli:main"]},
)
