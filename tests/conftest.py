import json
import logging
from typing import Any, Callable, Mapping

import pytest

from jwt_inspector import b64url_encode
from jwt_inspector.logging_setup import LOGGER_NAME

# Cognito access token (RS256, signature not verifiable here)
COGNITO_ACCESS_TOKEN = (
    "eyJraWQiOiJoczgzVE5VMDJjSUlzM1Q5MlZWTzlNMUR5VjM4MFBoUUdLT2VPdHN3T3hNPSIsImFsZyI6IlJTMjU2In0.eyJzdWIiOiI5NDE4ZjRlOC0yMGIxLTcwOWEtMDkwZS1kYTAzNmExZjdmODciLCJjb2duaXRvOmdyb3VwcyI6WyJhZHZpc29yIiwiYWRtaW4iXSwiaXNzIjoiaHR0cHM6XC9cL2NvZ25pdG8taWRwLnVzLWVhc3QtMS5hbWF6b25hd3MuY29tXC91cy1lYXN0LTFfNUdmOU1uY2QzIiwiY2xpZW50X2lkIjoiMnFzNXNvcW8zcG1uOHAzcjhtcGV1aHZyamkiLCJvcmlnaW5fanRpIjoiY2ZhNzVhOWYtM2JkZC00ZGZlLWIxZWMtYzc1NjViNTMxYjNhIiwiZXZlbnRfaWQiOiIyNGFkYzlkOC02M2NjLTQzODgtYTk4MS01MTZiMjdkY2IyZTkiLCJ0b2tlbl91c2UiOiJhY2Nlc3MiLCJzY29wZSI6ImF3cy5jb2duaXRvLnNpZ25pbi51c2VyLmFkbWluIiwiYXV0aF90aW1lIjoxNzQ5MzM2MTgyLCJleHAiOjE3NDkzMzk3ODIsImlhdCI6MTc0OTMzNjE4MiwianRpIjoiN2M2YWNhZTktYWY1NS00MTQ1LTk0YmEtMjEyMTJjMDNmMWQ5IiwidXNlcm5hbWUiOiI5NDE4ZjRlOC0yMGIxLTcwOWEtMDkwZS1kYTAzNmExZjdmODcifQ.mG8BzQxSAgVKGlsMtHhlyUgHooDcjgERVa33XYjPJO2YfgCwj1j3Nv6fdEBZ7a0KUK1SMZaAG_7AzCkZwCChEW1WcK7-TnYIJWfBbDBz7uGLAPYkraa9kusPQL07DMGqEhdmzvWYn562dw4VDKMbMd4XASt8pZCZ14PhKttdc2dniV-aOJdgkazpz0925o1ook1rfnduoGph1zV4BCflQrk75dZkhNYG2RVJN4_rIw6QOySYyC5dsjG4kgWFzX2lAD6Ehol3Qp8aBdC4N6MBcpy4QJhRTzVztJrXEzSOPUHym0d06L4riwV1IosYcdXDA_S9YHSVrEhXgZCPDsKOw"
)

SECRET = "inspection-only-test-secret-0123456789abcdef"


@pytest.fixture
def make_token() -> Callable[..., str]:
    def _make(
        header: Mapping[str, Any] | None = None,
        payload: Mapping[str, Any] | None = None,
        signature: str = "c2lnbmF0dXJl",
    ) -> str:
        header = {"alg": "HS256", "typ": "JWT"} if header is None else header
        payload = {"sub": "1234567890"} if payload is None else payload
        return ".".join(
            [
                b64url_encode(json.dumps(header)),
                b64url_encode(json.dumps(payload)),
                signature,
            ]
        )

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
