from setuptools import find_packages, setup

setup(
    name="docpage",
    version="0.3.0",
    description="Build a static API page from generated docs with hosted source links",
    author="William Wieselquist",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "jinja2",  # Page header/footer templates
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "docpage=docpage.cli:main",
        ],
    },
)
