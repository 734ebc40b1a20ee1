from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="iteration-adapters",
    version="1.0.0",
    description="Brings bulk traversal, enumeration adapters and canonical empty cursors from newer runtimes to any iterator-like cursor.",
    packages=["iteration_adapters", "iteration_adapters._src"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    author="Jack Nguyen",
    author_email="jackyeenguyen@gmail.com",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
