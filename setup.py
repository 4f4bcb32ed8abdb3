"""Setup configuration for the Prediction Market Simulator package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="prediction-market-sim",
    version="0.1.0",
    author="Prediction Market Simulator Contributors",
    description="Regime-driven prediction market path with a momentum/news trading agent",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["prediction_sim", "prediction_sim.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.3",
            "pytest-cov>=5.0.0",
            "mypy>=1.11.2",
            "black>=24.8.0",
            "ruff>=0.6.9",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Office/Business :: Financial :: Investment",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
    ],
    entry_points={
        "console_scripts": [
            "prediction-sim=prediction_sim.cli.simulate_cli:main",
        ],
    },
)
