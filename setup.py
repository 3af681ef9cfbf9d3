import setuptools

setuptools.setup(
    name = 'bezierfit',
    version = '1.0',
    description = 'smooth cubic Bezier splines through anchor points (natural cubic and Hobby)',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires = '>=3.8',
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
