import os

from setuptools import find_packages, setup


def read_version():
    ns = {}
    with open(os.path.join('fibheap', 'version.py')) as f:
        exec(f.read(), ns)
    return ns['__version__']


setup(name='fibheap',
      version=read_version(),
      description='Fibonacci heap with handles, melding and cost auditing',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.9',
      install_requires=[
          'numpy>=1.20',
          'scipy>=1.7',
          'click>=7.0',
          'treelib>=1.6.1',
      ],
      extras_require={'test': ['pytest>=6']},
      entry_points={'console_scripts': ['fibheap = fibheap.__main__:main']})
