# setup.py
from setuptools import setup, find_packages

setup(
    name="seo_gateway",
    version="0.1.0",
    description="Crawler-aware homepage gateway: prerendered HTML for bots, SPA redirect for browsers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "jinja2>=3.1",
        "lxml>=4.9",
        "markupsafe>=2.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "seo-gateway=seo_gateway.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
