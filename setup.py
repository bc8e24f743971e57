from setuptools import find_packages, setup


setup(
    name="devtool",
    version="1.0.0",
    description="Handy CLI helpers for web dev: JSON minify/pretty, case, URL, base64, env and version tools",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["devtool = devtool.cli:main"]},
)
