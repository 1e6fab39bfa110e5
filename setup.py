from setuptools import find_packages, setup

setup(
    name="zhomology",
    version="0.1.0",
    description="Exact integral homology of finite simplicial complexes via Smith normal form",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pydantic>=2",
        "loguru",
        "rich",
        "typing_extensions",
    ],
    extras_require={"test": ["pytest"]},
)
