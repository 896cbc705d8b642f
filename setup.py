from pathlib import Path

from setuptools import find_packages, setup

test_requires = [
    'pytest'
]

setup(
    name='sleepbar',
    version='1.0.0',
    license='Affero',
    packages=find_packages(exclude=('tests',)),
    description='Wait a number of seconds while showing a progress bar.',
    python_requires='>=3.6',
    long_description=Path('README.md').read_text(),
    long_description_content_type='text/markdown',
    install_requires=[
        'click >= 7.0',
        'colorama',
        'python-decouple',
        'tqdm'
    ],
    extras_require={
        'test': test_requires,
    },
    tests_require=test_requires,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Utilities',
    ],
    entry_points={
        'console_scripts': [
            'sleepbar = sleepbar.cli:sleepbar',
        ],
    },
)
