from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="graph-algos",
    version="0.1.0",
    description=(
        "Generic directed graphs with BFS, Dijkstra, Bellman-Ford and "
        "topological sort."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "graph-algos=graph_algos.cli:main",
        ],
    },
)
