from setuptools import setup, find_packages

setup(
    name='folder-command-history',
    version='1.0.0',
    description='Reversible folder commands with an undo history',
    packages=find_packages(include=['folder_api', 'folder_api.*', 'folder_core', 'folder_core.*']),
    install_requires=[],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'folder-commands = folder_core.__main__:main',
        ],
    },
    python_requires='>=3.8',
)
