import setuptools
import os

PACKAGE = 'waveform_path'
DESCRIPTION = "Smooth SVG curve paths and Douglas-Peucker simplification for waveform data"

VERSION = "v0.1.0"

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

with open("requirements.txt", "r", encoding="utf-8") as f:
    requirements = [x.strip() for x in f.readlines() if len(x.strip()) > 0 and not x.startswith('#')]

with open(os.path.join(PACKAGE, 'VERSION.txt'), 'w') as f:
    f.write(VERSION)

setuptools.setup(
    name=PACKAGE.replace('_', '-'),
    version=VERSION.replace('v', ''),
    author="btw i use arch",
    author_email="git@local",
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    entry_points={
        'console_scripts': [
            str(PACKAGE.replace('_', '-') + '=' + PACKAGE + '.__main__:main'),
        ]
    },
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    package_data={PACKAGE: ['config/*.yaml', 'VERSION.txt']},
    python_requires=">=3.6",
)
