#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

readme = """Join class tools read a Unicode property extract and a font's
glyph list and write the joining glyph classes of an Arabic font"""

setup(
    name="jointools",
    version="0.1.0",
    description="Arabic joining class tools",
    license="Apache",
    long_description=readme,
    python_requires=">=3.7",
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    install_requires=[
        "fontTools",
    ],
    extras_require={
        "test": ["pytest"],
    },
    package_data={"jointools": ["data/*.txt", "data/glyph_data/*.txt",]},
    entry_points={
        "console_scripts": [
            "make_join_classes = jointools.join_classes:main",
            "glyphcoverage = jointools.font_glyphs:main",
        ]
    },
)
