from setuptools import setup, find_packages

setup(
    name='hornschunck',
    version='1.0.0',
    description='Horn-Schunck optical flow with spatio-temporal gradient estimators',
    packages=find_packages(include=['hornschunck', 'hornschunck.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.21',
        'scipy>=1.7',
    ],
    extras_require={
        'dev': ['pytest>=7.0'],
    },
    test_suite='tests',
    tests_require=['pytest>=7.0'],
)
