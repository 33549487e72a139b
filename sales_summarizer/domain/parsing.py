"""Tab-separated sales data parsing"""

import math
import re
from typing import List

from sales_summarizer.domain.exceptions import EmptyInputError, InvalidNumberError, MalformedLineError
from sales_summarizer.domain.models import Record

FIELD_DELIMITER = "\t"
GROUPING_SEPARATOR = ","
REQUIRED_FIELDS = 3

# Leading numeric prefix: optional sign, then Infinity or an ASCII decimal literal with optional exponent
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")


def parse_number(text: str) -> float:
    """
    Convert a sales/cost field to a float.

    Grouping commas are removed first ("1,000" -> 1000.0). Parsing is
    permissive: trailing text after the numeric prefix is ignored
    ("12.5 USD" -> 12.5) and a field with no numeric prefix yields nan.
    """
    match = _NUMERIC_PREFIX.match(text.replace(GROUPING_SEPARATOR, ""))
    if not match:
        return math.nan
    return float(match.group(1))


def parse_records(raw_text: str, strict_numbers: bool = False) -> List[Record]:
    """
    Parse newline-delimited, tab-separated "date, sales, cost" rows.

    Blank lines are skipped. Columns beyond the third are ignored. The first
    malformed line aborts the whole parse, no partial result is returned.

    Args:
        raw_text: Pasted table text
        strict_numbers: Raise InvalidNumberError instead of letting nan through

    Returns:
        Records in input order
    """
    if not raw_text.strip():
        raise EmptyInputError()

    records = []
    for line_number, line in enumerate(raw_text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue

        fields = line.split(FIELD_DELIMITER)
        if len(fields) < REQUIRED_FIELDS:
            raise MalformedLineError(line_number, len(fields))

        day, sales_text, cost_text = fields[:REQUIRED_FIELDS]
        sales = parse_number(sales_text)
        cost = parse_number(cost_text)

        if strict_numbers:
            if math.isnan(sales):
                raise InvalidNumberError(line_number, "sales", sales_text)
            if math.isnan(cost):
                raise InvalidNumberError(line_number, "cost", cost_text)

        records.append(Record(date=day, sales=sales, cost=cost, line_number=line_number))

    return records
