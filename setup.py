import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    package_data={"ethereum_monitor": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "ethereum-types>=0.2.1,<0.3",
        "pydantic>=2.0,<3",
    ],
    extras_require={
        "test": ["pytest>=8.2.2,<9"],
        "lint": [
            "isort==5.13.2",
            "mypy==1.10.0",
            "black==23.12.0",
            "flake8==7.1.0",
        ],
    },
)
