"""Literal file contents emitted into generated Express projects.

The modules in this package only hold data. Selecting the right variant and
filling in project specific values is done by :mod:`express_scaffold.registry`.
"""
