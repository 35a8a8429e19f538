from setuptools import setup, find_packages
setup(
    name="homeventure",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "fastapi>=0.100",
        "pydantic>=2.0",
        "requests>=2.28",
        "uvicorn>=0.22",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "httpx>=0.24",
        ],
    },
    entry_points={
        'console_scripts': [
            'homeventure=homeventure.__main__:main'
        ]
    }
)
