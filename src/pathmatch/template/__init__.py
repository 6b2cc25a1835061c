"""Template compiler — lexer, recursive-descent parser, and the compiled tree.

Templates are compiled once into an immutable ``CompiledTemplate`` and
reused across any number of matches.
"""
