from setuptools import setup, find_packages

LINTERS_REQUIREMENTS = [
    "black",
    "mypy",
]

TEST_REQUIREMENTS = [
    "pytest",
    # simultaneously run pytest on multiple cores with `pytest -n NUMCORES`
    "pytest-xdist",
    "pytest-cov",
    "hypothesis",
]

setup(
    name="array-subset",
    version="0.1.0",
    description="Assert that a nested mapping or sequence contains a subset",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Framework :: Pytest",
        "Topic :: Software Development :: Testing",
    ],
    zip_safe=False,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "array_subset": ["py.typed"],
    },
    include_package_data=True,
    install_requires=["structlog", "typing_extensions"],
    python_requires=">=3.7",
    extras_require={
        "linters": LINTERS_REQUIREMENTS,
        "test": TEST_REQUIREMENTS,
        "dev": LINTERS_REQUIREMENTS + TEST_REQUIREMENTS,
    },
)
