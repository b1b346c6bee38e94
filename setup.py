from setuptools import setup, find_packages

setup(
    name="keyedsiphash",
    version="0.1.0",
    description="Keyed SipHash-c-d for byte strings: one-shot and incremental hashing with configurable rounds, fixed-width output encodings and uint64 column hashing for dataframes.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    author="Shlok Tadilkar",
    author_email="shloktadilkar@gmail.com",
    url="https://github.com/shloktech/keyedsiphash",
    project_urls={
        "Source": "https://github.com/shloktech/keyedsiphash",
        "Tracker": "https://github.com/shloktech/keyedsiphash/issues",
        "Documentation": "https://github.com/shloktech/keyedsiphash#readme",
    },
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
