from setuptools import setup, find_packages

setup(
    name="polyrecover",
    version="1.0",
    description="Exact recovery of polynomial constant terms from sample points in arbitrary bases",
    long_description=("Recovers the constant term of a polynomial of degree k-1 from n >= k sample points whose "
                      "values are given as digit strings in bases 2 to 36, using Vandermonde systems solved by "
                      "Gaussian elimination over exact rational numbers"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["polyrecover", "polyrecover.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    entry_points={"console_scripts": ["polyrecover = polyrecover.cli:main"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["polynomial interpolation", "exact arithmetic", "gaussian elimination", "secret sharing"],
    zip_safe=False,
)
