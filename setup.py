from setuptools import setup, find_packages


setup(name='glmath',
      version='1.0.0',
      description='Vector, matrix, and quaternion routines for 3D graphics and simulation',
      packages=find_packages(include=['glmath', 'glmath.*']),
      python_requires='>=3.10',
      install_requires=['numpy', 'pandas'],
      extras_require={'test': ['pytest']})
