from setuptools import setup, find_packages

setup(
    name='multiDatePicker',
    version='0.1.0',
    description='Calendar model for a date picker that selects a single day, any days, or a date range.',
    author='René Lachmann',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'tabulate',
        'python-dotenv',
        'markdown',
    ],
    entry_points={
        'console_scripts': [
            'multidatepicker=multidatepicker.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['multidatepicker.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
