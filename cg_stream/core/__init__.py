"""Core parsing and serialization modules.

WHY: The core is the stable heart of the package: the data model and the
parse/serialize pair. The formatters and the CLI are thin shells over it
and must not leak file I/O or encoding concerns back in.

HOW: model.py defines the data structures, classifier.py decides what
each line is, builder.py folds classified lines into cohorts, and
serializer.py renders cohorts back to text.

RULES:
- No file I/O, no JSON, no configuration lookups in this package
- parse() and serialize() are total functions
"""
