# Copyright ClusterHQ Inc.  See LICENSE file for details.

"""
Generate a trytools package.
"""

import os

from setuptools import setup, find_packages

HERE = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(HERE, "README.rst")) as readme:
    description = readme.read()


def parse_requirements(requirements_file):
    """
    Parse a requirements file.

    Blank lines and comments are skipped. Environment markers are left in
    place for setuptools to evaluate.
    """
    requirements = []
    with open(os.path.join(HERE, requirements_file)) as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                requirements.append(line)
    return requirements

# Parse the ``.in`` files. This will allow the dependencies to float when
# trytools is installed using ``pip install .``.
install_requires = parse_requirements("requirements/trytools.txt.in")
dev_requires = parse_requirements("requirements/trytools-dev.txt.in")

setup(
    # This is the human-targetted name of the software being packaged.
    name="trytools",
    # This is a string giving the version of the software being packaged.  For
    # simplicity it should be something boring like X.Y.Z.
    version="1.0.0",
    # This identifies the creators of this software.  This is left symbolic for
    # ease of maintenance.
    author="ClusterHQ Team",
    # This is contact information for the authors.
    author_email="support@clusterhq.com",
    # Here is a website where more information about the software is available.
    url="https://clusterhq.com/",

    # A short identifier for the license under which the project is released.
    license="Apache License, Version 2.0",

    # Some details about what trytools is.  Synchronized with the README.rst to
    # keep it up to date more easily.
    long_description=description,

    # This setuptools helper will find everything that looks like a *Python*
    # package (in other words, things that can be imported) which are part of
    # the trytools package.
    packages=find_packages(include=('trytools', 'trytools.*')),

    python_requires=">=3.11",

    install_requires=install_requires,

    extras_require={
        # This extra is for developers who need to work on trytools itself.
        "dev": dev_requires,
    },

    # Some "trove classifiers" which are relevant.
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Framework :: Twisted",
        "Topic :: Software Development :: Testing",
        ],
    )
