"""
Functionality used elsewhere. Almost all of these functions are not intended to be utilized by
the end-user and are not exposed in the external API.
"""
from collections import OrderedDict
import datetime as dt
import json
import os

import numpy as np
import pandas as pd


def _convert_nan_and_datelike_values(values):
    """Make all items JSON serializable

    Args:
        values (list)

    Returns:
        list: A copy of the list, with datelike-object converted to strings, and None and np.nans
            converted to empty strings so that the cells they occupy are cleared on write
    """
    output = []
    for row in values:
        new_row = []
        for item in row:
            if item is None or (isinstance(item, float) and np.isnan(item)):
                new_row.append('')
            elif isinstance(item, (dt.date, dt.datetime, dt.time)):
                new_row.append(str(item))
            else:
                new_row.append(item)
        output.append(new_row)
    return output


def _unique_keys(keys):
    """ Drop empty and repeated header names, keeping the first occurrence """
    seen = []
    for key in keys:
        if key and key not in seen:
            seen.append(key)
    return seen


def grid_to_records(value_range):
    """Convert one ValueRange from the Sheets API into a list of header-keyed records

    The first row is taken as the header row. Subsequent empty rows are skipped. Cells with no
    header above them are dropped, and cells missing at the end of a row are left out of that
    row's record.

    Args:
        value_range (dict): A ValueRange, i.e. {'range': ..., 'majorDimension': ..., 'values': ...}

    Returns:
        list: A list of OrderedDicts, one per non-empty data row, e.g.::

            [{header1: row1cell1, header2: row1cell2},
             {header1: row2cell1, header2: row2cell2},
             ...]
    """
    rows = value_range.get('values', [])
    if not rows:
        return []

    keys = rows[0]
    records = []
    for row in rows[1:]:
        if not row:
            continue

        record = OrderedDict()
        for key, value in zip(keys, row):
            if not key:
                continue
            record[key] = value
        records.append(record)

    return records


def grid_to_df(value_range):
    """Convert one ValueRange from the Sheets API into a pandas.DataFrame

    Rows are processed as in grid_to_records(); cells missing from a row become NaN.

    Args:
        value_range (dict): A ValueRange as returned by the Sheets API

    Returns:
        pandas.DataFrame: One column per header, one row per non-empty data row
    """
    rows = value_range.get('values', [])
    if not rows:
        return pd.DataFrame([])

    columns = _unique_keys(rows[0])
    return pd.DataFrame.from_records(grid_to_records(value_range), columns=columns)


def _format_value_ranges(ranges, value_ranges, formatter):
    """Apply `formatter` to each fetched ValueRange

    Args:
        ranges (list): The range names that were requested
        value_ranges (list): The ValueRanges returned for those names, in the same order
        formatter (callable): Called as formatter(range_name, value_range)

    Returns:
        The formatted range if one range was requested, otherwise an OrderedDict mapping
        each range name to its formatted range
    """
    if len(ranges) == 1:
        return formatter(ranges[0], value_ranges[0])

    return OrderedDict(
        (range_name, formatter(range_name, value_range))
        for range_name, value_range in zip(ranges, value_ranges)
    )


def _write_json(data, path):
    """Write `data` as JSON to `path`

    Returns:
        str: The absolute path written to
    """
    output_path = os.path.abspath(path)
    with open(output_path, 'w') as f:
        json.dump(data, f)
    return output_path
