from setuptools import find_namespace_packages, setup

setup(
    name="genapi",
    version="0.1.0",
    description="Pointwise operator API generator and comparison kernel matrix.",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["genapi*", "shared*"]),
    package_data={"genapi": ["templates/*.j2"]},
    python_requires=">=3.10",
    install_requires=["torch", "jinja2"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["genapi=genapi.cli:main"]},
)
