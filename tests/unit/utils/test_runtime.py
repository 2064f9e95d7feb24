"""Unit tests for runtime utilities in runtime.py.

Test coverage includes:

1. running_locally() behavior
2. running_in_lambda() behavior
"""

import pytest

from linkshortener.utils.runtime import running_locally, running_in_lambda
from linkshortener.utils.constants import APP_ENV_ENV, AWS_SAM_LOCAL_ENV, AWS_LAMBDA_FUNCTION_NAME_ENV


@pytest.mark.parametrize(
    'app_env, sam_flag, expected',
    [
        ('local', None, True),
        ('LOCAL', None, True),
        (None, None, True),
        ('dev', None, False),
        ('dev', 'true', True),
    ],
)
def test_running_locally(monkeypatch, app_env, sam_flag, expected):
    """running_locally() evaluates local execution correctly."""
    if app_env is None:
        monkeypatch.delenv(APP_ENV_ENV, raising=False)
    else:
        monkeypatch.setenv(APP_ENV_ENV, app_env)

    if sam_flag is None:
        monkeypatch.delenv(AWS_SAM_LOCAL_ENV, raising=False)
    else:
        monkeypatch.setenv(AWS_SAM_LOCAL_ENV, sam_flag)

    assert running_locally() is expected


@pytest.mark.parametrize(
    'function_name, expected',
    [
        ('linkshortener-redirect-url', True),
        ('', False),
        (None, False),
    ],
)
def test_running_in_lambda(monkeypatch, function_name, expected):
    """running_in_lambda() follows AWS_LAMBDA_FUNCTION_NAME."""
    if function_name is None:
        monkeypatch.delenv(AWS_LAMBDA_FUNCTION_NAME_ENV, raising=False)
    else:
        monkeypatch.setenv(AWS_LAMBDA_FUNCTION_NAME_ENV, function_name)

    assert running_in_lambda() is expected
