from setuptools import setup, find_packages

setup(
    name="convoy-build",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"convoy.embeddable": ["Dockerfile", "entrypoint.sh"]},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "click>=8.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "convoy-build=convoy.CLI.main:main",
        ],
    },
)
