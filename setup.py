import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    if not os.path.exists(README):
        return ""
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="wsdl_to_types",
    version="1.0.0",
    description="Generate TypeScript type declarations from WSDL schema fragments",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="wsdl xsd xml schema code generation typescript types",
    license="MIT",
    packages=find_packages(include=["wsdl_to_types", "wsdl_to_types.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wsdl_to_types=wsdl_to_types.wsdl_to_types:wsdl_to_types",
        ],
    },
    include_package_data=True,
    package_data={
        "wsdl_to_types": ["templates/**/*.jinja2"],
    },
    zip_safe=False,
)
