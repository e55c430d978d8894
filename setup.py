# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
__version__ = '0.1.0'
__license__ = 'MIT'
__author__ = 'The ff2sixel authors'

import inspect
import os

filename = inspect.getfile(inspect.currentframe())
dirpath = os.path.abspath(os.path.dirname(filename))
long_description = open(os.path.join(dirpath, "README.rst")).read()

setup(name                  = 'ff2sixel',
      version               = __version__,
      description           = 'farbfeld to sixel converter',
      long_description      = long_description,
      classifiers           = ['Development Status :: 4 - Beta',
                               'Topic :: Terminals',
                               'Environment :: Console',
                               'Intended Audience :: End Users/Desktop',
                               'License :: OSI Approved :: MIT License',
                               'Programming Language :: Python :: 3'
                               ],
      keywords              = 'sixel farbfeld terminal codec',
      author                = __author__,
      license               = __license__,
      packages              = find_packages(exclude=['test', 'test.*']),
      zip_safe              = False,
      include_package_data  = False,
      python_requires       = '>=3.7',
      install_requires      = ['numpy', 'Pillow'],
      extras_require        = {'test': ['pytest']},
      entry_points          = {'console_scripts': ['ff2sixel = ff2sixel.__main__:main']},
      )
