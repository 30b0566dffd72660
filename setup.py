from setuptools import setup, find_packages

setup(
    name="patchmate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest", "whatthepatch"],
    },
    entry_points={
        "console_scripts": ["patchmate=patchmate.cli:main"],
    },
)
