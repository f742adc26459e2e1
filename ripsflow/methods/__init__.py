"""
**METHODS**

Construction of Rips complexes: the Rips graph of a point cloud and its
expansion into a flag complex.
"""
