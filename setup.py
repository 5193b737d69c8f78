import setuptools


with open("README.md", "r") as readme_file:
    readme = readme_file.read()

setuptools.setup(
    name="bartrim",
    version="0.1.0",
    description="Code128 B svg barcodes and margin trimming of barcode images",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    install_requires=["Pillow"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["bartrim=bartrim.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.6"
)
