"""Exceptions raised while loading the lab test dataset."""


class DatasetError(Exception):
    """Base class for dataset loading failures."""


class DatasetNotFoundError(DatasetError):
    """The dataset file is missing or unreadable."""


class DatasetFormatError(DatasetError):
    """The dataset has no header row or no data rows."""


class EmptyDatasetError(DatasetError):
    """The dataset parsed but no row carries a test name."""
