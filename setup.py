from setuptools import setup, find_packages

setup(
    name="jsonrest",
    version="0.1.0",
    description="Minimal client for JSON REST APIs built on requests",
    author="Dimitar Navushtanov",
    author_email="dimitar.navushtanov@fadata.eu",
    packages=find_packages(include=["jsonrest", "jsonrest.*"]),
    package_data={"jsonrest.configs": ["config.yml"]},
    install_requires=[
        "requests",
        "typer",
        "pydantic>=2",
        "python-dotenv",
        "PyYAML",
        "rich",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["jsonrest=jsonrest.cli.main:app"]},
    python_requires=">=3.8",
)
