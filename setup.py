from setuptools import setup, find_packages

setup(
    name='sort-css-media-queries',
    version='1.1.1',
    description='Mobile-first and desktop-first sorting of CSS media queries',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.10',
    install_requires=[
        'pyyaml>=6.0',
        'pyuca>=1.2',
    ],
    extras_require={
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
            'mypy>=1.5.0',
        ]
    },
)
