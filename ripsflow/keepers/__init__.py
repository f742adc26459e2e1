"""
**KEEPERS**

Data structures used to store filtered simplicial complexes.
"""
