from ._helpers import (
    catch_to_option,
    make_some,
    map_option,
    optional_catch,
    optional_defined,
    optional_map,
    optional_resolve,
    resolve_to_option,
    to_optional,
    unwrap,
    unwrap_expect,
    unwrap_or,
)
from ._http import DEFAULT_HEADERS, fetch_with_option
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
    make_err,
    make_ok,
)
from ._types import (
    Headers,
    OptionalNoneRecord,
    OptionalRecord,
    OptionalSomeRecord,
    Request,
)

__all__ = [
    "DEFAULT_HEADERS",
    "NONE",
    "Err",
    "Headers",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "OptionalNoneRecord",
    "OptionalRecord",
    "OptionalSomeRecord",
    "Request",
    "Result",
    "ResultUnwrapError",
    "Some",
    "catch_to_option",
    "fetch_with_option",
    "make_err",
    "make_ok",
    "make_some",
    "map_option",
    "optional_catch",
    "optional_defined",
    "optional_map",
    "optional_resolve",
    "resolve_to_option",
    "to_optional",
    "unwrap",
    "unwrap_expect",
    "unwrap_or",
]
