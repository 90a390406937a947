import setuptools

setuptools.setup(
    name="parsex",
    version="0.1.0",
    license="MIT License",
    description="String parser combinators with whitespace-preserving results",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    python_requires=">=3.8",
    install_requires=["typing_extensions"],
    extras_require={
        "tests": ["pytest"],
        "bench": ["pyperf"],
    },
    zip_safe=False,
)
