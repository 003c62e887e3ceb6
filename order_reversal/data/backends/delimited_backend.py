from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Optional

from pydantic import ValidationError

from ..interface import OrderSource
from ..models import OrderRecord
from ...config import get_config
from ...errors import OrderParseError
from ...logging import get_logger


FIELD_COUNT = 3

# Only CR, LF and CRLF end a record; other Unicode line breaks belong to the description
LINE_BREAK = re.compile(r"\r\n|\r|\n")


class DelimitedOrderSource(OrderSource):
    """
    Delimited text implementation.
    - One order per line: `<id>;<description>;<amount>`, no header row.
    - The file is read in one go when iteration starts; lines are parsed one at a
      time as the caller asks for the next order.
    - There is no escaping: a delimiter inside the description shifts the fields.
    """

    def __init__(
        self,
        path: str | Path = None,
        delimiter: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> None:
        config = get_config()
        if path is None:
            path = Path(config.data_dir) / config.orders_file

        self.path = Path(path)
        self.delimiter = delimiter if delimiter is not None else config.orders_delimiter
        if not self.delimiter:
            raise ValueError("Order delimiter must not be empty")
        self.encoding = encoding if encoding is not None else config.orders_encoding
        self.logger = get_logger(__name__)

    # ---------- reading / parsing helpers ----------

    def _read_lines(self) -> List[str]:
        if not self.path.exists():
            self.logger.error(f"Order file not found: {self.path}")
            raise FileNotFoundError(
                f"Order file not found: {self.path.resolve()}\n"
                f"Please either:\n"
                f"  1. Place the file in the working directory\n"
                f"  2. Set DATA_DIR / ORDERS_FILE environment variables to point to your file\n"
                f"  3. Pass an explicit path to load_orders()"
            )
        self.logger.debug(f"Reading orders from {self.path}")
        text = self.path.read_text(encoding=self.encoding)
        return LINE_BREAK.split(text)

    def _parse_line(self, line: str, line_number: int) -> OrderRecord:
        fields = line.split(self.delimiter)
        if len(fields) < FIELD_COUNT:
            raise OrderParseError(
                f"Line {line_number}: expected {FIELD_COUNT} fields separated by "
                f"'{self.delimiter}', got {len(fields)}: {line!r}",
                line_number=line_number,
                line=line,
            )

        try:
            return OrderRecord(id=fields[0], customer_name=fields[1], amount=fields[2])
        except ValidationError as e:
            bad = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise OrderParseError(
                f"Line {line_number}: cannot convert {bad} in {line!r}",
                line_number=line_number,
                line=line,
            ) from e

    # ---------- interface implementation ----------

    def load_orders(self) -> Iterator[OrderRecord]:
        lines = self._read_lines()
        count = 0
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                order = self._parse_line(line, line_number)
            except OrderParseError as e:
                self.logger.error(str(e))
                raise
            count += 1
            yield order
        self.logger.debug(f"Loaded {count} orders from {self.path}")


def load_orders(path: str | Path = None) -> Iterator[OrderRecord]:
    """Lazily yield the orders stored in `path` (defaults to the configured order file)."""
    return DelimitedOrderSource(path).load_orders()
