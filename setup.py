#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

readme = open('README.rst').read()
version = (1, 0, 0)

setup(
    name='rationals',
    python_requires=">=3.9",
    version=".".join(map(str, version)),
    description='Exact rational numbers with approximation tracking',
    long_description=readme,
    packages=[
        'rationals',
    ],
    install_requires=[
        "numpy",
        "pydantic>=2",
    ],
    extras_require={
        'test': ['pytest'],
    },
    license="LGPLv2",
    zip_safe=False,
    classifiers=[
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Scientific/Engineering :: Mathematics'
    ],
)
