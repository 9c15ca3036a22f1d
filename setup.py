from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'envguard',
    version = '0.1.0',
    description = 'Declare environment variables where they are used and validate them all before serving',
    packages = find_packages(exclude=('test', 'test.*')),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov'],
    },
    entry_points = {
        'console_scripts': ['envguard=envguard.cli:main'],
    },
)
