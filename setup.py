"""Setup script for FinTrack Insights package."""

from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fintrack-insights",
    version="0.1.0",
    author="FinTrack Team",
    description="Personal-finance insight calculations: cash flow, net worth and SIP projections",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[
        "core", "core.*",
        "projections", "projections.*",
        "insights", "insights.*",
        "data_prep", "data_prep.*",
        "app", "app.*",
    ]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Office/Business :: Financial",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pydantic>=2.6.0",
        "python-dateutil>=2.8.2",
        "streamlit>=1.28.0",
        "altair>=5.0.0",
        "openpyxl>=3.1.0",
        "xlrd>=2.0.1",
    ],
    extras_require={
        "dev": [
            "pytest>=7.3.0",
            "pytest-cov>=4.0.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.3.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fintrack-dashboard=app:launch",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
