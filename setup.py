import setuptools

setuptools.setup(
    name="dicecalc",
    version="0.0.0",
    classifiers=["Programming Language :: Python :: 3"],
    packages=["dicecalc"],
    package_data={"dicecalc": ["dice.lark", "settings.default.yaml"]},
    entry_points={"console_scripts": ["dicecalc=dicecalc.__main__:main"]},
    install_requires=["lark", "pyyaml", "plotly", "kaleido", "pandas"],
    extras_require={"test": ["pytest"]},
)
