from setuptools import setup, find_packages

setup(
    name="lineage-graph",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "click>=8.0",
        "pyarrow>=10.0",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "lineage-graph=lineage_graph.cli.query:cli",
        ],
    },
)
