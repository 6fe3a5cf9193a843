import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    if not os.path.exists(README):
        return ""
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="ws_ts_gen",
    version="0.3.0",
    description="Generate TypeScript WebSocket servers, clients and types from AsyncAPI documents",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Intended Audience :: Developers",
    ],
    keywords="asyncapi websocket typescript code generation",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ws_ts_gen=ws_ts_gen.ws_ts_gen:ws_ts_gen",
        ],
    },
    include_package_data=True,
    package_data={
        "ws_ts_gen": ["templates/**/*.jinja2", "tests/test_data/**/*"],
    },
    zip_safe=False,
)
