import os

import pandas as pd
from pathlib import Path
from textwrap import dedent

def _docstring_parameter(**kwds):
    """\
    Docstrings should start with "\" in the first line for proper formatting.
    """
    def dec(obj):
        obj.__orig_doc__ = obj.__doc__
        obj.__doc__ = dedent(obj.__doc__).format_map(kwds)
        return obj
    return dec


_desc_expansion = """\
Expand the 1-skeleton into its flag complex.

Every simplex whose vertices are pairwise connected by an edge is added, up to
``max_dimension``. The filtration value of a new simplex is the maximum
filtration value among its facets.
"""

_desc_max_dimension = """\
max_dimension : `int`
    Maximal dimension of the simplices in the resulting complex, ``max_dimension >= 0``.
"""

_desc_threshold = """\
threshold : `float`
    Rips threshold. Two points are connected by an edge if their distance is
    less than or equal to ``threshold``.
"""


def load_from_file(file_name, file_path=None, file_format=None,
                  delimiter=',', **kwargs):

    """ Load tabular data from file.

    .. note::
       Loads data using ``pandas.read_csv``.

    Parameters
    ----------
    file_name: {`str`, `pathlib.Path`}
        Input data file name.
    file_path: {`str` `pathlib.Path`}, optional (default: None)
        File path. Empty string by default
    file_format: `str`, optional (default: None)
        File format. Currently supported file formats: 'txt', 'csv', 'tsv'.
        If `None`, ``file_format`` will be inferred from the file extension
        in ``file_name``.
    delimiter: `str`, optional (default: ',')
        Delimiter to use.
    **kwargs
        Additional key-word arguments passed to ``pandas.read_csv``.

    Returns
    -------
    f : `pandas.DataFrame`
        The loaded table.
    """
    if file_path is None:
        file_path = ''

    if not isinstance(file_name, str):
        file_name = str(file_name)

    if file_format is None:
        file_format = file_name.split('.')[-1]
    else:
        file_name = '.'.join([file_name, file_format])

    _fp = Path(os.path.join(file_path, file_name))

    if file_format in ['txt', 'csv', 'tsv']:
        f = pd.read_csv(_fp, sep=delimiter, **kwargs)
    else:
        raise ValueError("Unrecognized file_format.")

    return f
