# setup.py
from setuptools import setup, find_packages

setup(
    name="ngram-load",
    version="0.1.0",
    description="Order-by-order streaming reader for Web1T-style n-gram count corpora",
    package_dir={"": "src"},
    packages=find_packages("src", include=["ngram_load", "ngram_load.*"]),
    python_requires=">=3.8",
    install_requires=[
        "tqdm",
        "setproctitle",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
