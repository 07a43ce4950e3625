"""Global constants used throughout the paginator.

This module centralizes the defaults, query parameter names and error codes
shared by the models and helpers.
Logging is configured through the Powertools environment variables
(POWERTOOLS_LOG_LEVEL, POWERTOOLS_SERVICE_NAME).
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Input Errors
ERROR_CODE_MISSING_TOTAL_RESULTS: Final = "MISSING_TOTAL_RESULTS"
ERROR_CODE_MISSING_BASE_URL: Final = "MISSING_BASE_URL"

# Request Parsing Errors
ERROR_CODE_VALIDATION_FAILED: Final = "VALIDATION_FAILED"


# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_LIMIT: Final = 10
DEFAULT_PAGE: Final = 1
FIRST_PAGE: Final = 1

# ============================================================================
# Link Rendering
# ============================================================================

PAGE_QUERY_PARAM: Final = "page"
PAGE_SIZE_QUERY_PARAM: Final = "page_size"
