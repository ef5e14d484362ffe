import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="wordforms",
    version="0.1.0",
    description="MySpell dictionaries reader and word forms generator in pure Python",
    long_description=long_description,
    packages=setuptools.find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)",

        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",

        "Operating System :: OS Independent",

        "Topic :: Text Processing :: Linguistic"
    ],
    python_requires='>=3.7',
    extras_require={
        "test": ["pytest"]
    },
    keywords=["myspell", "hunspell", "spelling", "morphology", "unmunch"]
)
