from setuptools import setup, find_packages

setup(
    name="publication_xml",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
        "pydantic-settings",
        "lxml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "publication-xml=publication_xml.cli.main:main",
        ],
    },
    python_requires=">=3.10",
)
