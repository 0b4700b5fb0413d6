import os
from pathlib import Path
from setuptools import setup, find_packages


LONG_DESCRIPTION_SRC = 'README.rst'


def read(file):
    with open(os.path.abspath(file), 'r', encoding='utf-8') as f:
        return f.read()


# Parse version
init = Path(__file__).parent.joinpath("woocommerce", "__init__.py")
for line in init.read_text().split("\n"):
    if line.startswith("__version__ ="):
        break
version = line.split(" = ")[-1].strip('"')

setup(
    name='WooCommerceRestApi',
    packages=find_packages(exclude=["tests", "tests.*"]),
    version=version,
    license='MIT',
    description='Typed Python client for the WooCommerce REST API, with generated data for offline use',
    long_description=read(LONG_DESCRIPTION_SRC),
    long_description_content_type="text/x-rst; charset=UTF-8",
    keywords=["woocommerce", "woocommerce-api", "wordpress", "python", "python3", "rest-api", "faker"],
    python_requires=">=3.8",
    install_requires=["requests", "Faker"],
    extras_require={
        "test": ["pytest", "python-dotenv"],
    },
)
