"""Loader for delimited two-column text datasets."""

import math
from pathlib import Path

from loguru import logger

from linreg.core.data.datasets import Dataset
from linreg.core.errors import DataIOError, DataParseError


class DatasetLoader:
    """Parses delimited text into a :class:`Dataset`.

    The first non-blank line holds the two column labels, every following
    non-blank line holds one ``x<delimiter>y`` pair. Blank lines are skipped.
    """

    def __init__(self, delimiter: str = ",") -> None:
        self._delimiter = delimiter

    def load_file(self, path: str | Path) -> Dataset:
        """Reads and parses a dataset file.

        Args:
            path: Location of the delimited text file.

        Returns:
            Dataset: The parsed labels and pairs.

        Raises:
            DataIOError: If the file cannot be read.
            DataParseError: If a line is malformed.
        """
        path = Path(path)
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DataIOError(path, str(exc)) from exc

        dataset = self.load_text(contents, source=str(path))
        logger.info(f"Loaded {len(dataset)} rows from {path} with labels {dataset.labels}")
        return dataset

    def load_text(self, text: str, source: str = "<string>") -> Dataset:
        """Parses dataset contents already held in memory.

        Args:
            text: Raw delimited text.
            source: Name used in error messages.

        Returns:
            Dataset: The parsed labels and pairs.

        Raises:
            DataParseError: If the label line or a data line is malformed.
        """
        labels: tuple[str, str] | None = None
        pairs: list[tuple[float, float]] = []

        for line_num, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            first, second = self._split_fields(line, source, line_num)
            if labels is None:
                if not first or not second:
                    raise DataParseError(source, "column labels must not be empty", line_num)
                labels = (first, second)
            else:
                pairs.append(
                    (
                        self._parse_float(first, source, line_num),
                        self._parse_float(second, source, line_num),
                    )
                )

        if labels is None:
            raise DataParseError(source, "missing label line")

        return Dataset.from_pairs(labels, pairs)

    def _split_fields(self, line: str, source: str, line_num: int) -> tuple[str, str]:
        fields = [field.strip() for field in line.split(self._delimiter)]
        if len(fields) != 2:
            raise DataParseError(
                source,
                f"expected 2 fields separated by '{self._delimiter}', got {len(fields)}",
                line_num,
            )
        return fields[0], fields[1]

    def _parse_float(self, field: str, source: str, line_num: int) -> float:
        try:
            value = float(field)
        except ValueError:
            raise DataParseError(source, f"'{field}' is not a number", line_num) from None
        if not math.isfinite(value):
            raise DataParseError(source, f"'{field}' is not a finite number", line_num)
        return value
