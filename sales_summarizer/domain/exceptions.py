"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AnalysisError(DomainException):
    """Raw text could not be summarized"""

    pass


class EmptyInputError(AnalysisError):
    """No data was supplied"""

    def __init__(self, message: str = "No data supplied. Paste tab-separated sales data first."):
        super().__init__(message)


class MalformedLineError(AnalysisError):
    """A line does not carry date, sales and cost columns"""

    def __init__(self, line_number: int, field_count: int):
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(
            f"Invalid data format on line {line_number}: each line needs at least "
            f"3 tab-separated values (date, sales, cost), found {field_count}"
        )


class InvalidNumberError(AnalysisError):
    """A sales or cost field has no numeric value"""

    def __init__(self, line_number: int, field_name: str, value: str):
        self.line_number = line_number
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid {field_name} value on line {line_number}: {value!r} is not a number")
