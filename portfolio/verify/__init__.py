from .errors import BuildError, PageNotFound, VerificationError
from .expectations import CheckResult, Expectation, contains, count_of, matches
from .pages import PAGE_EXPECTATIONS
from .runner import BuildResult, PageResult, SiteReport, load_page, run_build, verify, verify_page, verify_site

__all__ = [
    "PAGE_EXPECTATIONS",
    "BuildError",
    "BuildResult",
    "CheckResult",
    "Expectation",
    "PageNotFound",
    "PageResult",
    "SiteReport",
    "VerificationError",
    "contains",
    "count_of",
    "load_page",
    "matches",
    "run_build",
    "verify",
    "verify_page",
    "verify_site",
]
