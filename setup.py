from setuptools import find_packages, setup


setup(
    name="catpath",
    version="1.0.0",
    description="Concatenate directory paths into a clean, deduplicated path list",
    license="GPL-2.0-or-later",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["catpath", "catpath.*"]),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["catpath = catpath.cli:main"]},
)
