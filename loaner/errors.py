"""Errors raised while assembling loan parameters."""


class LoanBuilderError(Exception):
    """Base exception for all loan builder errors."""


class InvalidLoanParameter(LoanBuilderError):
    """Raised when a supplied value is out of range."""

    template = "{value}"

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(self.template.format(value=value))


class InvalidPrincipal(InvalidLoanParameter):
    template = "Loan principal must be a positive number, received {value}"


class InvalidAnnualRate(InvalidLoanParameter):
    template = "Loan annual rate must be a number between 0 and 1, received {value}"


class InvalidDuration(InvalidLoanParameter):
    template = "Loan duration must be in months and greater than 0, received {value}"


class MissingLoanParameter(LoanBuilderError):
    """Raised by build() when a field was never set."""

    message = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class MissingPrincipal(MissingLoanParameter):
    message = "Loan principal must be a positive number"


class MissingAnnualRate(MissingLoanParameter):
    message = "Loan annual rate must be a number between 0 and 1"


class MissingDuration(MissingLoanParameter):
    message = "Loan duration must be in months and greater than 0"
