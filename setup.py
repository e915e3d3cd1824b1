from setuptools import setup

const: dict = {}
with open("flagkit/const.py") as f:
    exec(f.read(), const)

setup(
    name="flagkit",
    version=const["VERSION_STR"],
    python_requires='>=3.10',
    description=const["DESCRIPTION"],
    packages=["flagkit"],
    install_requires=[
        "dataclasses-json",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "flagkit = flagkit:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
