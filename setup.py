from setuptools import setup, find_packages
setup(
    name='multi-build',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'multi_build': [
            'build/config/*.yaml',
            'build/config/*.ini',
        ],
    },
    description='Build configuration loader for multi-project native builds.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'multi-build = multi_build.cli:program.run',
        ],
    },
)
