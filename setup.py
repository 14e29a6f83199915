# setup.py
from setuptools import setup, find_packages

setup(
    name="ogz_analyzer",
    version="0.1.0",
    packages=find_packages(include=['ogz_analyzer', 'ogz_analyzer.*']),
    install_requires=[
        "construct>=2.10",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="A decoder for Cube 2 / Tesseract OGZ map files",
    keywords="ogz, octree, map, sauerbraten, tesseract",
    entry_points={
        'console_scripts': [
            'analyze-ogz=ogz_analyzer.main:main',
        ],
    }
)
