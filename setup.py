"""Integrates multicast with Python's setuptools."""

from setuptools import setup, find_packages

from multicast import _ROOT_DIRECTORY_PATH as ROOT_DIRECTORY_PATH

with open(ROOT_DIRECTORY_PATH / 'multicast' / 'assets' / 'VERSION', encoding='utf-8') as f:
    VERSION = f.read().strip()

with open(ROOT_DIRECTORY_PATH / 'README.md', encoding='utf-8') as f:
    long_description = f.read()


extras_require_test = [
    'coverage ~= 7.2, >= 7.2.4',
    'pytest >= 7.3.1',
    'pytest-asyncio >= 0.21.0',
    'pytest-cov >= 4.0.0',
    'pytest-mock ~= 3.10, >= 3.10.0',
]


extras_require_setuptools = [
    'setuptools >= 68.2.2',
    'twine >= 4.0.0',
    'wheel >= 0.40.0',
]


extras_require_development = [
    'autopep8 ~= 2.0, >= 2.0.2',
    'basedmypy ~= 2.0, >= 2.2.1',
    'flake8 >= 6.0.0',
    'types-pyyaml ~= 6.0, >= 6.0.6',
    *extras_require_test,
    *extras_require_setuptools,
]


SETUP = {
    'name': 'multicast',
    'description': 'Multicast delegates: forward method calls to many observers, each on its own execution context',
    'long_description': long_description,
    'long_description_content_type': 'text/markdown',
    'version': VERSION,
    'license': 'GPLv3',
    'classifiers': [
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Topic :: Software Development :: Libraries',
        'Typing :: Typed ',
    ],
    'python_requires': '>= 3.11',
    'install_requires': [
        'pyyaml ~= 6.0, >= 6.0.0',
        'typing-extensions >= 4.8.0',
    ],
    'extras_require': {
        'development': extras_require_development,
        'setuptools': extras_require_setuptools,
        'test': extras_require_test,
    },
    'packages': find_packages(include=['multicast', 'multicast.*']),
    'package_data': {
        'multicast': ['assets/VERSION'],
    },
}

if __name__ == '__main__':
    setup(**SETUP)
