import setuptools

with open("README.md", "rt") as f:
    long_description = f.read()

setuptools.setup(
    name="document-mapper",
    version="0.1.0",
    description="Read and write nested documents with dotted path expressions",
    license="MIT license",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=['pyparsing>=3',],
    extras_require={'test': ['pytest',]},
)
