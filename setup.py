from setuptools import setup, find_packages

setup(
    name="configgen",
    version="0.1.0",
    description="Generates Dockerfile, devcontainer.json, docker-compose.yml and docker-bake.hcl scaffolds",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "python-dotenv>=1.0",
        "jinja2>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "configgen=configgen.CLI.main:main",
        ],
    },
)
