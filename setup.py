from os import path

from setuptools import setup

with open(path.join(path.abspath(path.dirname(__file__)), 'README.md')) as f:
    long_description = f.read()


setup(
    name="unix-ts",
    version="0.6.0",
    author="Luke Sneeringer",
    author_email="luke@sneeringer.com",
    description="Unix timestamp manipulation and conversion.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    keywords="date time unix-timestamp timestamp",
    url="https://github.com/lukesneeringer/unix-ts",
    packages=[
        'unix_ts',
    ],
    package_data={
        'unix_ts': ['py.typed']
    },
    extras_require={
        'tz': ['tzdata'],
        'test': ['pytest'],
    },
    test_suite="tests",
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
    ],
)
