# setup.py
from setuptools import setup, find_packages

setup(
    name="component-graph",
    version="0.1.0",
    description="Extract the component usage graph of a front-end (Angular) project",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'component-graph=componentgraph.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
