import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pybracket",
    version="0.1.0",
    author="Eric J. Whitney",
    author_email="eric.j.whitney@optusnet.removethispart.com.au",
    description="Bracketing methods for one-dimensional minimisation.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'examples': ['matplotlib'],
        'test': ['pytest'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='optimisation bracketing bisection quadratic fit',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pybracket',
                                               'pybracket.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Education",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
