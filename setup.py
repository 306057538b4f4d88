import setuptools

setuptools.setup(
    name="rgbacolor",
    version="0.1.0",
    description="Parse, cache and serialize CSS-style hex, rgb(), rgba() and named color strings.",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
