from collections import OrderedDict
import logging

import apiclient

from sheetlines import exceptions, helpers


logger = logging.getLogger(__name__)


class Line(object):
    def __init__(self, row_index, keys, read_cell, on_value_change):
        """Create a header-keyed view over one data row of a sheetlines.Range

        This class is not intended to be directly instantiated; lines are created by
        sheetlines.Range. A line holds no values of its own: every read and write goes
        through the owning range's grid.

        Args:
            row_index (int): Position of the row in the grid, starting at 1 (the header is row 0)
            keys (list): The owning range's header row. This is shared, not copied
            read_cell (callable): Callback taking (row_index, key_idx) and returning the cell
            on_value_change (callable): Callback taking (row_index, key_idx, value)
        """
        self.row_index = row_index
        self.keys = keys
        self._read_cell = read_cell
        self._on_value_change = on_value_change

    def __repr__(self):
        msg = "<{module}.{name}(row_index={row_index})>"
        return msg.format(module=self.__class__.__module__,
                          name=self.__class__.__name__,
                          row_index=self.row_index)

    def _get_key_idx(self, key):
        try:
            return self.keys.index(key)
        except ValueError:
            return None

    def get_value(self, key):
        """Return the value stored under `key` in this row

        Args:
            key (str): A header of the owning range

        Returns:
            The cell value, or None if `key` is not a header or the row ends before its column
        """
        key_idx = self._get_key_idx(key)
        if key_idx is None:
            return None
        return self._read_cell(self.row_index, key_idx)

    def set_value(self, key, value):
        """Set the value stored under `key` in this row

        Unknown keys are ignored: the header is never extended and no error is raised. A value
        of None or NaN is written to the sheet as an empty cell on save().

        Args:
            key (str): A header of the owning range
            value: The new cell value

        Returns:
            None
        """
        key_idx = self._get_key_idx(key)
        if key_idx is None:
            return
        self._on_value_change(self.row_index, key_idx, value)

    def to_dict(self):
        """ Return the row as an OrderedDict of header -> value """
        return OrderedDict((key, self.get_value(key)) for key in self.keys)


class Range(object):
    def __init__(self, sheet_id, range_name, data, sheets_svc):
        """Create a sheetlines.Range from the values of one fetched range.

        This class is not intended to be directly instantiated; it is created by
        sheetlines.Client.fetch_ranges().

        The first row of the range is used as the header row. Each subsequent row is exposed
        as a sheetlines.Line whose values can be read and written by header name.

        Args:
            sheet_id (str): The ID of the spreadsheet the range belongs to
            range_name (str): The A1 notation of the range, e.g. 'Sheet1!A1:D10'
            data (dict): The ValueRange returned by the Sheets API for this range
            sheets_svc (googleapiclient.discovery.Resource): An instance of Google Sheets
        """
        self.sheet_id = sheet_id
        self.range_name = range_name
        self.sheets_svc = sheets_svc
        self.major_dimension = data.get('majorDimension', 'ROWS')

        # The grid is copied so that the range exclusively owns it
        self._values = [list(row) for row in data.get('values', [])]
        self.keys = self._create_keys()
        self.lines = self._create_lines()

    def __repr__(self):
        msg = "<{module}.{name}(sheet_id='{sheet_id}', range_name='{range_name}')>"
        return msg.format(module=self.__class__.__module__,
                          name=self.__class__.__name__,
                          sheet_id=self.sheet_id,
                          range_name=self.range_name)

    def __iter__(self):
        return iter(self.lines)

    def __len__(self):
        return len(self.lines)

    @property
    def values(self):
        """ Property for the live grid of the range, header row included """
        return self._values

    def _create_keys(self):
        if not self._values or not self._values[0]:
            msg = "No header row found in the first line of range '{}'"
            raise exceptions.ValidationError(msg.format(self.range_name))
        return self._values[0]

    def _create_lines(self):
        return [self._make_line(row_index) for row_index in range(1, len(self._values))]

    def _make_line(self, row_index):
        return Line(row_index, self.keys, self._read_cell, self._on_value_change)

    def _read_cell(self, row_index, key_idx):
        row = self._values[row_index]
        if key_idx < len(row):
            return row[key_idx]
        return None

    def _on_value_change(self, row_index, key_idx, value):
        row = self._values[row_index]
        if key_idx >= len(row):
            # Cells between the end of the row and the new value are written as empty cells
            row.extend([''] * (key_idx + 1 - len(row)))
        row[key_idx] = value

    def get_lines(self):
        """Return the lines of the range, in sheet order

        The returned list is live: setting a value on one of its lines changes the range.

        Returns:
            list: sheetlines.Line instances, one per data row
        """
        return self.lines

    def new_line(self):
        """Append a blank row to the range

        Returns:
            sheetlines.Line: The new line. All of its values are initially None
        """
        self._values.append([])
        line = self._make_line(len(self._values) - 1)
        self.lines.append(line)
        return line

    def save(self):
        """Overwrite the range in Google Sheets with the current in-memory grid

        The whole grid, header included, is written in one call. Values are interpreted as if
        typed by a user, so formulas are evaluated and numeric strings become numbers. Cells
        that exist remotely but not in the grid are not preserved.

        Returns:
            dict: The UpdateValuesResponse from the Sheets API
        """
        body = {
            'values': helpers._convert_nan_and_datelike_values(self._values),
            'majorDimension': self.major_dimension,
        }
        try:
            response = self.sheets_svc.values().update(spreadsheetId=self.sheet_id,
                                                       range=self.range_name,
                                                       valueInputOption='USER_ENTERED',
                                                       body=body).execute()
        except apiclient.errors.HttpError as e:
            msg = "Unable to save range '{}'. Error generated: {}"
            raise exceptions.RemoteWriteError(msg.format(self.range_name, e))

        logger.info('Range %s saved successfully', self.range_name)
        return response
