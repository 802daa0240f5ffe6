"""Setup script for weierstrass-arith package."""

from setuptools import setup, find_packages

setup(
    name="weierstrass-arith",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    description="Point arithmetic on short Weierstrass curves over Z/mZ",
    packages=find_packages(include=["weierstrass", "weierstrass.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
)
