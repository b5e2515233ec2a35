from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="grokex",
    version="0.1.0",
    description="Grok pattern compiler and typed field extractor for log lines.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    package_data={
        "grokex.patterns": ["grok-patterns", "linux-syslog", "httpd", "java"],
    },
    python_requires=">=3.11",
    install_requires=["pyyaml"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
)
