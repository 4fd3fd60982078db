# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="includetree",
    version="0.1.0",
    description="Static #include dependency tree and include-count report for C++ projects",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["includetree", "includetree.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'includetree=includetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
