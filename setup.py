import setuptools
from setuptools import setup

install_deps = ['numpy',
                'numba>=0.60.0',
                'scipy>=1.3']

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="growregions",
    version="0.1.0",
    license="BSD",
    description="multi-label geodesic region growing for 2D images and 3D volumes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires = install_deps,
    extras_require={
      'test': ['pytest'],
    },
    include_package_data=True,
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    )
)
