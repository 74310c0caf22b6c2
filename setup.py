from setuptools import setup, find_packages

setup(
    name="slashargs",
    version="0.1.0",
    description="Declarative slash-style command line parsing with response files.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "python-json-logger>=3.1",
        "pydantic>=2",
        "pyyaml>=6",
        "toml>=0.10",
        "prompt_toolkit>=3",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
    entry_points={
        "console_scripts": ["slashargs=slashargs.main.main:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
