"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if lambda is running in local SAM, False otherwise.

    running_in_lambda() -> bool:
        True inside a Lambda execution environment (deployed or SAM local).

Example:
    >>> from linkshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from linkshortener.utils.constants import APP_ENV_ENV, AWS_SAM_LOCAL_ENV, AWS_LAMBDA_FUNCTION_NAME_ENV


def running_locally() -> bool:
    """Check if the lambda is running locally via sam local invoke

    Returns:
        bool: True if running locally, False otherwise.
    """
    env = os.getenv(APP_ENV_ENV, 'local').lower()
    return env == 'local' or os.getenv(AWS_SAM_LOCAL_ENV) == 'true'


def running_in_lambda() -> bool:
    """Check if the code runs inside a Lambda execution environment

    The Lambda runtime (and SAM's emulation of it) sets AWS_LAMBDA_FUNCTION_NAME
    before the handler module is imported.
    """
    return bool(os.getenv(AWS_LAMBDA_FUNCTION_NAME_ENV))
