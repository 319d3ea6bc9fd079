"""
Installation setup for cardjson
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("cardjson/resources/cardjson.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """
    Read a requirements file, if able
    :param file_name: Requirements file next to this script
    :return: Requirement specifiers
    """
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []
    with requirements_file.open(encoding="utf-8") as file:
        return [
            line.strip()
            for line in file
            if line.strip() and not line.startswith(("#", "-"))
        ]


setuptools.setup(
    name="cardjson",
    version=config.get("CardJSON", "version", fallback="1.0.0+fallback"),
    description="Card and set record decoding with precision-tagged release dates",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python",
        "Topic :: Software Development :: Testing",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "JSON",
        "MTG",
        "Trading Cards",
        "Magic: The Gathering",
    ],
    python_requires=">=3.10",
    include_package_data=True,
    package_data={"cardjson": ["resources/*.properties"]},
    packages=setuptools.find_packages(include=["cardjson", "cardjson.*"]),
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
    entry_points={"console_scripts": ["cardjson=cardjson.__main__:main"]},
)
