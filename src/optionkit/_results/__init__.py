from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._result import Err, Ok, Result, ResultUnwrapError, make_err, make_ok

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
    "make_err",
    "make_ok",
]
