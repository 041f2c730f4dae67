from glob import glob
from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
    'bandit',
    'mypy',
    'safety',
]


setup(
    name='calcpad',
    use_scm_version={
        # Building from a plain source tree, not a git checkout.
        'fallback_version': '0.1.0',
    },
    description='Keypad calculator',
    install_requires=[
        'regex',
        'prompt_toolkit>=3.0.36',
    ],
    packages=['calcpad'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    tests_require=TESTS_REQUIRE,
    extras_require={
        'test': TESTS_REQUIRE,
    },
    scripts=glob('bin/*'),
    license='ISC',
)
