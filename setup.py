from setuptools import setup, find_packages

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="dhddns",
    version="0.1.0",
    author="Dominick C. Pastore",
    description="Dynamic DNS updater for DreamHost",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPLv3+",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later "
        "(GPLv3+)",
        "Topic :: Internet :: Name Service (DNS)",
    ],

    packages=find_packages(exclude=["test", "test.*"]),
    install_requires=[
        "requests",
        "dnspython>=2.0",
        "importlib_metadata; python_version<'3.10'",
    ],
    python_requires=">=3.7",
    extras_require={
        "docs": ["sphinx"],
        "test": [
            "flake8",
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ]
    },

    entry_points={
        "console_scripts": [
            "dhddns=dhddns.main:main",
        ],
    },
)
