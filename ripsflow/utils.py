import os
from pathlib import Path

import numpy as np
import pandas as pd

from . import checks
from ._utils import load_from_file
from ._logging import _gen_logger

logger = _gen_logger(__name__)


def _strip_comments(lines):
    """ Split lines into tokens, dropping comments (starting with '#') and blank lines. """
    tokens = (line.split('#', 1)[0].split() for line in lines)
    return [t for t in tokens if t]


def _pop_tokens(lines, tokens):
    """ Put leftover ``tokens`` back in front of ``lines``. """
    return ([tokens] if tokens else []) + lines


def read_off_points(file_name):
    """ Read the point cloud of an OFF file.

    The expected layout is

    .. code-block:: text

        OFF
        n_points n_faces n_edges
        x_0 y_0 z_0
        ...

    The ``OFF`` keyword is optional. With the ``nOFF`` keyword, the line that
    follows gives the dimension of the points, so points of any dimension can be
    stored. Faces, if present, are ignored.

    Parameters
    ----------
    file_name : {`str`, `pathlib.Path`}
        Path to the OFF file.

    Returns
    -------
    points : `numpy.ndarray`, (n_points, dim)
        The points, in file order. The row index of a point is its vertex handle.
    """
    with open(file_name) as f:
        lines = _strip_comments(f)

    if len(lines) == 0:
        raise ValueError(f"Empty OFF file {str(file_name)}.")

    dim = None
    keyword = lines[0][0]
    if keyword.upper().endswith('OFF'):
        lines = _pop_tokens(lines[1:], lines[0][1:])
        if keyword.startswith('n'):
            if len(lines) == 0:
                raise ValueError("Missing dimension in nOFF file.")
            dim = int(lines[0][0])
            lines = _pop_tokens(lines[1:], lines[0][1:])

    if len(lines) == 0:
        raise ValueError("Missing number of points in OFF file.")
    n_points = int(lines[0][0])
    point_lines = lines[1:1 + n_points]
    if len(point_lines) < n_points:
        raise ValueError(f"OFF file declares {n_points} points but only {len(point_lines)} are given.")

    if dim is not None:
        if any(len(tokens) < dim for tokens in point_lines):
            raise ValueError(f"Points must have {dim} coordinates.")
        point_lines = [tokens[:dim] for tokens in point_lines]

    points = [[float(x) for x in tokens] for tokens in point_lines]
    if not checks.is_consistent_point_cloud(points):
        raise ValueError("All points in the OFF file must have the same number of coordinates.")

    logger.debug(f"Read {n_points} points from {str(file_name)}.")
    if n_points == 0:
        return np.zeros((0, 0 if dim is None else dim))
    return np.asarray(points, dtype=float)


def load_points(file_name, file_path=None, file_format=None, delimiter=',',
                header=None, **kwargs):
    """ Load a point cloud from file.

    Parameters
    ----------
    file_name: {`str`, `pathlib.Path`}
        Input data file name.
    file_path: {`str` `pathlib.Path`}, optional (default: None)
        File path. Empty string by default
    file_format: `str`, optional (default: None)
        File format, one of 'off', 'txt', 'csv', 'tsv'. If `None`,
        ``file_format`` will be inferred from the file extension in ``file_name``.
    delimiter: `str`, optional (default: ',')
        Delimiter used for tabular formats. One point per row.
    header : {`int`, `None`}, optional (default: None)
        Row number of the header for tabular formats, passed to ``pandas.read_csv``.
    **kwargs
        Additional key-word arguments passed to ``pandas.read_csv``.

    Returns
    -------
    points : `numpy.ndarray`, (n_points, dim)
        The points, in file order.
    """
    if not isinstance(file_name, str):
        file_name = str(file_name)

    fmt = file_name.split('.')[-1] if file_format is None else file_format
    if fmt.lower() == 'off':
        fname = file_name if file_format is None else '.'.join([file_name, file_format])
        return read_off_points(Path(os.path.join('' if file_path is None else file_path, fname)))

    df = load_from_file(file_name, file_path=file_path, file_format=file_format,
                        delimiter=delimiter, header=header, **kwargs)
    return df.values.astype(float)


def stack_triu_(d, name=None):
    """ Stack the upper triangular entries of a square matrix above the diagonal.

    .. note::

       Useful for symmetric matrices like distances. Entries are ordered
       lexicographically by ``(row, column)``.

    Parameters
    ----------
    d : {`numpy.ndarray`, `pandas.DataFrame`}, (n, n)
        Matrix to stack. Upper triangular entries are taken as provided,
        with no check that the matrix is symmetric.
    name : `str`
        Optional name of pandas Series output ``d_stacked``.

    Returns
    -------
    d_stacked : `pandas.Series`
        The stacked upper triangular entries, indexed by ``(vertex_a, vertex_b)``
        with ``vertex_a < vertex_b``.
    """
    if isinstance(d, pd.DataFrame):
        d = d.values
    d = np.asarray(d)
    rows, cols = np.triu_indices(d.shape[0], 1)
    index = pd.MultiIndex.from_arrays([rows, cols], names=['vertex_a', 'vertex_b'])
    d_stacked = pd.Series(data=d[rows, cols], index=index, name=name)
    return d_stacked
