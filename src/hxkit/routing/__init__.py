"""Routing — URL generation from route templates.

Templates are tokenized once into placeholder tables and cached for the
life of the process. URLs are built by substituting path placeholders
and appending the remaining values as query parameters.
"""
