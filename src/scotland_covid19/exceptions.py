"""
Exceptions raised by this package
"""

from __future__ import annotations

from pathlib import Path


class ScotlandCovid19DataError(Exception):
    """
    Base class for errors raised while obtaining or reading the data
    """


class MissingDataFileError(ScotlandCovid19DataError, FileNotFoundError):
    """
    Raised when a required data file is not available locally and can't be fetched
    """

    def __init__(self, path: Path, reason: str | None = None) -> None:
        """
        Initialise the error

        Parameters
        ----------
        path
            Path at which the file was expected

        reason
            Why the file could not be supplied
        """
        error_msg = f"Required data file is missing: {path}"
        if reason is not None:
            error_msg = f"{error_msg} ({reason})"

        super().__init__(error_msg)
        self.path = path


class MalformedRecordError(ScotlandCovid19DataError, ValueError):
    """
    Raised when a value can't be parsed into the type its column requires
    """

    def __init__(
        self,
        value: str,
        expected: str,
        path: Path | None = None,
        row: int | None = None,
        column: str | None = None,
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        value
            Value which could not be parsed

        expected
            Description of what was expected (e.g. "an integer")

        path
            File from which `value` was read

        row
            Row (1-based, excluding the header) from which `value` was read

        column
            Column from which `value` was read
        """
        location = [
            f"{name}={v!r}"
            for name, v in (("path", path), ("row", row), ("column", column))
            if v is not None
        ]
        error_msg = f"{value!r} is not {expected}"
        if location:
            error_msg = f"{error_msg}. {', '.join(location)}"

        super().__init__(error_msg)
        self.value = value
        self.expected = expected
        self.path = path
        self.row = row
        self.column = column

    def with_location(
        self,
        path: Path | None = None,
        row: int | None = None,
        column: str | None = None,
    ) -> MalformedRecordError:
        """
        Get a copy of this error with location information filled in

        Parameters
        ----------
        path
            File from which the value was read

        row
            Row from which the value was read

        column
            Column from which the value was read

        Returns
        -------
        :
            New error, keeping any location information already held
        """
        return type(self)(
            value=self.value,
            expected=self.expected,
            path=self.path if self.path is not None else path,
            row=self.row if self.row is not None else row,
            column=self.column if self.column is not None else column,
        )


class NetworkFailureError(ScotlandCovid19DataError):
    """
    Raised when a remote file or the remote revision could not be retrieved
    """

    def __init__(self, url: str, reason: str) -> None:
        """
        Initialise the error

        Parameters
        ----------
        url
            URL which was being retrieved

        reason
            Description of the failure
        """
        super().__init__(f"Failed to retrieve {url}: {reason}")
        self.url = url
