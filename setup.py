import time
from setuptools import find_packages, setup


project_name = 'cvxrs-packager'
version = '0.1.%s' % int(time.time())

SCRIPTS = [
    'cvxrs-package=cvxrs_packager.packager:main'
]

DEPENDENCIES = [
    'pyyaml>=5.1',
    'tomli>=1.1; python_version < "3.11"'
]


TEST_DEPENDENCIES = [
    'pytest',
    'mock',
    'pytest-mock',
    'coverage'
]


setup_config = {
    'name': project_name,
    'version': version,
    'description': "Build and package helper for cvxrs-studio",
    'python_requires': ">=3.8",
    'package_dir': {"": "src"},
    'packages': find_packages(where="src", exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    'install_requires': DEPENDENCIES,
    'tests_require': TEST_DEPENDENCIES,
    'extras_require': {
        'test': TEST_DEPENDENCIES,
        'dev': TEST_DEPENDENCIES,
    },
    'include_package_data': True,
    'entry_points': { 'console_scripts': SCRIPTS },
}

if __name__ == '__main__':
    setup(**setup_config)
