from setuptools import setup, find_packages

setup(
   name='algorders',
   version='1.0',
   description='Orders, maximal orders, conductors and Schur indices of algebras over QQ',
   author='The algorders developers',
   packages=find_packages(exclude=['tests']),
   install_requires=['passagemath-standard'],
   extras_require={'test': ['pytest']},
)
