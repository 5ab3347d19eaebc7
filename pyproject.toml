[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "arbolado"
version = "0.1.0"
description = "Binary trees, binary search trees and AVL trees with in-order iteration, plus small list utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "avl", "data structures", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arbolado-lists = "arbolado.listops:main"
arbolado-bst = "arbolado.bst:main"
arbolado-avl = "arbolado.avl:main"
arbolado-height-avl = "arbolado.height_avl:main"

[tool.setuptools.packages.find]
include = ["arbolado*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
