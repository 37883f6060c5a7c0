# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="pathinfo",
    version="1.0.0",
    description="Parse, validate and resolve filesystem path strings across platform conventions",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["pathinfo", "pathinfo.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'pathinfo=pathinfo.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
