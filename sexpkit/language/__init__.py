"""
Lexical building blocks shared by the s-expression reader.
"""
