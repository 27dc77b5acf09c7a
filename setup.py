import setuptools

setuptools.setup(
    name="gurgle",
    version="0.0.0",
    classifiers=["Programming Language :: Python :: 3"],
    packages=setuptools.find_packages(exclude=["tests"]),
    package_data={"gurgle": ["gurgle.lark", "limits.default.yaml"]},
    entry_points={"console_scripts": ["gurgle=gurgle.__main__:main"]},
    install_requires=["lark", "pyyaml"],
    extras_require={"test": ["pytest"]},
)
