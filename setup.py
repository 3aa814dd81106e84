from setuptools import find_packages, setup


setup(
    name="HelloServer",
    version="1.0.0",
    description="Minimal HTTP server with validated environment configuration",
    long_description=open("README.md", encoding="UTF8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows :: Windows 10",
        "Operating System :: Microsoft :: Windows :: Windows 11",
        "Intended Audience :: Developers",
    ],
    install_requires=[
        "fastapi[standard]~=0.115.12",
        "starlette>=0.46.2",
        "pydantic~=2.10",
        "python-dotenv~=1.0",
    ],
    extras_require={
        "uvicorn": ["uvicorn~=0.34.0"],
        "linters": ["ruff~=0.11.2", "mypy~=1.15.0"],
        "dev": [
            "ruff>=0.11.2",
            "sphinx>=5.0.2",
            "sphinx-rtd-theme>=3.0.2",
            "httpx>=0.27.0",
            "pytest>=8.3.5,<9.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hello-server=hello_server.main:run_server",
        ],
    },
    packages=find_packages(include=["hello_server", "hello_server.*"])
)
