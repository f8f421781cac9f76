from setuptools import setup

from pwsafecommander import __version__

install_requires = [
    'colorama',
    'cryptography>=39.0.1',
    'pyperclip',
    'tabulate',
    'twofish',
]

if __name__ == '__main__':
    setup(
        name='pwsafecommander',
        version=__version__,
        description='Command line reader for Password Safe v3 databases',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',
        python_requires='>=3.8,<3.12',
        packages=['pwsafecommander', 'pwsafecommander.commands'],
        install_requires=install_requires,
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'pwsafe=pwsafecommander.__main__:main',
            ],
        },
    )
