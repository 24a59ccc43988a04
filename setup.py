from setuptools import setup

setup(
    name='moonphase',
    version='2024.4.8',
    description='Show the phase of the Moon as a name, an emoji, or a number',
    license='MIT',
    packages=['moonphase'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=8.0',
        'numpy',
        'pendulum>=3.0',
        'tzlocal>=4.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'moonphase=moonphase.__main__:main',
        ],
    },
)
