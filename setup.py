import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="spellscan",
    version="0.1.0",
    description="Markup-aware word extraction for spellchecking TeX, SGML/HTML and *roff documents",
    long_description=long_description,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "spylls>=0.1.5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",

        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",

        "Operating System :: OS Independent",

        "Topic :: Text Processing :: Linguistic",
        "Topic :: Text Processing :: Markup :: LaTeX",
        "Topic :: Text Processing :: Markup :: HTML"
    ],
    python_requires='>=3.7',
    keywords=["spelling", "spellcheck", "tex", "sgml", "nroff", "tokenizer"]
)
