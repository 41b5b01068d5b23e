import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="npoint",
    version="0.1",
    description="Fixed-dimension numeric points with element-wise arithmetic in Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["npoint", "npoint.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10',
    install_requires=[
        "attrs",
        "expression>=5",
        "numpy",
    ],
    extras_require={
        "test": ["hypothesis", "pytest"],
    },
)
