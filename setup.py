from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()
install_requires = [
    "numpy",
]

setup(
    name="storeless-stats",
    version="0.1.0",
    author="Fuzail Palnak",
    author_email="fuzailpalnak@gmail.com",
    description="Streaming Statistics, Geometric Mean Over A Sum Of Logs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.6",
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    keywords=["Statistics", "Geometric Mean", "Streaming", "Accumulator"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
