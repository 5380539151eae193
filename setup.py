import setuptools

setuptools.setup(
    name = 'bezspline',
    version = '1.0',
    description = 'piecewise Bezier spline fitting and resampling of 1-D curves',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)
