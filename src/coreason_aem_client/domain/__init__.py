from .package import PackageIdentity
from .response import Response, Result, ResultData
from .retry import RetryOptions, RetryPolicy

__all__ = [
    "PackageIdentity",
    "Response",
    "Result",
    "ResultData",
    "RetryOptions",
    "RetryPolicy",
]
