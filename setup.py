from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs',
    'PyNaCl',
    'sanic',
    'sanic-cors',
]

test_requirements = [
    'pytest',
    'sanic-testing',
]

setup(
    name='votingledger',
    version=__version__,
    description='In-memory token ledger with a signature gated, single vote election.',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
    include_package_data=True,
)
