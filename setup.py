from setuptools import setup, find_packages

setup(
    name="stormglass_client",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24",
        "pandas>=1.5",
    ],
    extras_require={
        "test": ["pytest>=7", "pytest-asyncio>=0.21"],
    },
    description="Async StormGlass marine forecast client with NOAA point normalization.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
