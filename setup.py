#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

import runpy

from setuptools import find_packages, setup

# This reads the __version__ variable from jwpauli/_version.py
__version__ = runpy.run_path('src/jwpauli/_version.py')['__version__']
assert __version__, 'Version string cannot be empty'

# The readme file is used as the long_description:
long_description = '=======\n' + 'jwpauli\n' + '=======\n\n'
with open('README.rst', 'r', encoding='utf-8') as readme:
    long_description += readme.read()


def _read_requirements(path):
    with open(path) as r:
        requirements = r.readlines()
    requirements = [r.strip() for r in requirements]
    return [r for r in requirements if r and not r.startswith('#')]


# Read in package requirements.
requirements = _read_requirements('dev_tools/requirements/deps/runtime.txt')

# Read in test requirements.
test_requirements = _read_requirements('dev_tools/requirements/deps/pytest.txt')

setup(
    name='jwpauli',
    version=__version__,
    license='Apache 2',
    author='The jwpauli Developers',
    description=('Jordan-Wigner conversion of classified fermion '
                 'Hamiltonians into Pauli Hamiltonians.'),
    long_description=long_description,
    python_requires='>=3.10.0',
    install_requires=requirements,
    extras_require={'test': test_requirements},
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Topic :: Scientific/Engineering :: Chemistry',
        'Topic :: Scientific/Engineering :: Quantum Computing',
    ],
    keywords=[
        'chemistry',
        'fermion',
        'hamiltonians',
        'jordan-wigner',
        'pauli',
        'quantum chemistry',
        'quantum computing',
        'qubit hamiltonians',
    ],
)
