#!/usr/bin/env python

from setuptools import setup

setup(name='staff',
      version='0.1',
      description='A python library for converting between MIDI notes and chord symbols',
      install_requires=['numpy'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      packages=['staff', 'staff.test'],
      package_dir = {'staff': 'src'}
     )
