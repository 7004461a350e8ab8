from setuptools import find_packages, setup

setup(
    name="tapo_power",
    version="0.1.0",
    description="A tool to measure and monitor the power draw of Tapo smart plugs",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "tapo>=0.8.0",
        "python-dotenv>=1.0.0",
        "pandas>=1.5.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "plotext>=5.2.8",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tapo-power=tapo_power.cli:main",
        ],
    },
    python_requires=">=3.9",
)
