# SPDX-License-Identifier: MIT


class DaysheetError(Exception):
    """Base class for every error reported through the abort path."""


class SheetRangeError(DaysheetError, ValueError):
    pass


class SheetArgumentError(DaysheetError, ValueError):
    pass


class SheetExistsError(DaysheetError):
    pass


class SheetNotFoundError(DaysheetError):
    pass


class SheetIOError(DaysheetError):
    pass


class EmptySheetError(DaysheetError, ValueError):
    """Raised when a document holds no well-formed time cells."""


class ConfigurationError(DaysheetError):
    pass
