#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

setup(
        name = 'mdlite',
        version = "0.1.0",
        description = "Small, predictable Markdown to HTML converter that escapes raw HTML",
        license = "MIT",
        packages = ["mdlite"],
        scripts = ["bin/mdlite"],
        keywords = ["markup", "markdown", "html"],
        python_requires = ">=3.6",
        test_suite = "test",
        install_requires = []
        )
