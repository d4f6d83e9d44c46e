from setuptools import find_packages, setup

setup(name='treemerge',
      version='0.1.0',
      description='Minimum spanning trees by merging partial trees',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.10',
      install_requires=['click', 'numpy', 'pyparsing>=3.0'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['treemerge = treemerge.__main__:main']})
