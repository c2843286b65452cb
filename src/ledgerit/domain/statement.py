"""Statement file parsing."""

import csv
from pathlib import Path
from typing import Union

from ledgerit.domain.entities import Transaction
from ledgerit.domain.errors import StatementError, statement_row_error
from ledgerit.utils.amount_parser import parse_amount
from ledgerit.utils.date_parser import parse_date
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)


class StatementParser:
    """Reads bank statement CSV exports.

    Each row holds date, amount and description in that order. A header row
    is recognised when its first cell is not a date.
    """

    def __init__(self, day_first: bool = False):
        """Initialize statement parser.

        Args:
            day_first: Read ambiguous numeric dates as day/month/year
        """
        self.day_first = day_first

    def parse(self, path: Union[str, Path]) -> list[Transaction]:
        """Load a statement file.

        Args:
            path: Path to the CSV statement

        Returns:
            Transactions in file order

        Raises:
            StatementError: If the file is missing, unreadable or malformed
        """
        statement_path = Path(path)
        if not statement_path.is_file():
            raise StatementError(f"Statement file not found: {path}")

        try:
            with open(statement_path, "r", encoding="utf-8-sig", newline="") as f:
                sample = f.read(1024)
                f.seek(0)
                try:
                    delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
                except csv.Error:
                    delimiter = ","
                rows = list(csv.reader(f, delimiter=delimiter))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise StatementError(f"Could not read statement {path}: {e}") from e

        transactions = []
        for row_num, row in enumerate(rows, start=1):
            if not any(cell.strip() for cell in row):
                continue
            if len(row) < 3:
                raise StatementError(
                    statement_row_error(str(path), row_num, "expected date, amount and description")
                )
            try:
                txn_date = parse_date(row[0], day_first=self.day_first)
            except ValueError as e:
                if not transactions and row_num == 1:
                    # Header row
                    continue
                raise StatementError(statement_row_error(str(path), row_num, e)) from e
            try:
                amount = parse_amount(row[1])
            except ValueError as e:
                raise StatementError(statement_row_error(str(path), row_num, e)) from e
            transactions.append(Transaction(date=txn_date, amount=amount, description=row[2].strip()))

        logger.info("Parsed %d rows from %s", len(transactions), path)
        return transactions
