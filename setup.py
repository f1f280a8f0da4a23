import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("bigchunk/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="bigchunk",
    version=version,
    description="Unsigned arbitrary-precision integers built from fixed-width chunks.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    extras_require={
        'test': [
            'hypothesis',
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # bignum
            # arbitrary precision
            # long division
            # modular exponentiation
    ],
)
