import jwt
import pytest

from jwt_inspector import (
    CompactTokenDecoder,
    DecodeFailure,
    DecodeSuccess,
    DecodeTokenUseCase,
    ErrorStage,
    PyJWTTokenDecoder,
    b64url_encode,
    decode_token,
    decode_token_readable,
)
from jwt_inspector.domain.entities import DecodedToken
from jwt_inspector.domain.exceptions import ClaimsParseError
from jwt_inspector.integrations.common.inspector_factory import (
    InspectorDependencies,
    create_inspector_dependencies,
)

from conftest import COGNITO_ACCESS_TOKEN, SECRET


@pytest.mark.parametrize(
    "header, payload",
    [
        ({"alg": "HS256", "typ": "JWT"}, {"sub": "1234567890", "name": "John Doe", "iat": 1516239022}),
        ({"alg": "RS256", "kid": "abc"}, {"groups": ["admin"], "nested": {"a": [1, 2, {"b": None}]}}),
        ({"alg": "none"}, {}),
        ({"alg": "HS256"}, {"name": "Zoë ✓ 日本", "flag": True, "ratio": 0.25}),
    ],
)
def test_decode_token_round_trip(make_token, header, payload):
    result = decode_token(make_token(header, payload))

    assert isinstance(result, DecodeSuccess)
    assert result.to_dict() == {"header": header, "payload": payload}


def test_decode_cognito_access_token():
    result = decode_token(COGNITO_ACCESS_TOKEN)

    assert result.ok
    assert result.header["alg"] == "RS256"
    assert "kid" in result.header
    assert result.payload["token_use"] == "access"
    assert result.payload["exp"] == 1749339782
    assert result.payload["cognito:groups"] == ["advisor", "admin"]
    assert result.signature is None


@pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c.d", "....", "no dots at all"])
def test_wrong_part_count_is_a_format_error(token):
    result = decode_token(token)

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.FORMAT
    assert result.error == "Invalid JWT format: token must have 3 parts."


@pytest.mark.parametrize("token", ["..", "..'", "\x00.\x00.\x00", "a..c", "é.é.é"])
def test_malformed_three_part_tokens_never_raise(token):
    result = decode_token(token)

    assert isinstance(result, DecodeFailure)
    assert result.error.startswith("Failed to decode token: ")


def test_non_base64url_characters_are_a_decode_error(make_token):
    valid = make_token()
    header, payload, signature = valid.split(".")

    for token in [f"e$$.{payload}.{signature}", f"{header}.p@yl*ad.{signature}"]:
        result = decode_token(token)
        assert isinstance(result, DecodeFailure)
        assert result.stage is ErrorStage.DECODE
        assert result.error.startswith("Failed to decode token: ")


def test_non_json_payload_is_a_parse_error(make_token):
    header = make_token().split(".")[0]
    token = f"{header}.{b64url_encode(b'definitely not json')}.sig"

    result = decode_token(token)

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.PARSE
    assert result.error.startswith("Failed to decode token: payload: ")


def test_non_object_json_is_a_parse_error(make_token):
    header = make_token().split(".")[0]

    for raw in [b"[1, 2]", b'"text"', b"42", b"null"]:
        result = decode_token(f"{header}.{b64url_encode(raw)}.sig")
        assert isinstance(result, DecodeFailure)
        assert result.stage is ErrorStage.PARSE


def test_deeply_nested_json_is_a_parse_error(make_token):
    header = make_token().split(".")[0]
    result = decode_token(f"{header}.{b64url_encode('[' * 100000)}.sig")

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.PARSE


def test_invalid_utf8_is_a_decode_error(make_token):
    header = make_token().split(".")[0]
    invalid_utf8 = b64url_encode(b'{"a": "\xff"}')
    result = decode_token(f"{header}.{invalid_utf8}.sig")

    assert isinstance(result, DecodeFailure)
    assert result.error.startswith("Failed to decode token: ")


def test_error_messages_do_not_echo_token_content(make_token):
    secret_claims = make_token(payload={"password": "hunter2"}).split(".")[1]
    token = f"!!!broken-header!!!.{secret_claims}.sig"

    result = decode_token(token)

    assert isinstance(result, DecodeFailure)
    assert secret_claims not in result.error
    assert "broken-header" not in result.error


def test_complete_decode_keeps_signature(make_token):
    token = make_token(signature="raw-signature_segment")

    result = decode_token(token, complete=True)

    assert result.signature == "raw-signature_segment"
    assert result.to_dict()["signature"] == "raw-signature_segment"


def test_decode_token_readable(make_token):
    result = decode_token_readable(make_token(payload={"exp": 1749339782, "iat": "soon"}))

    assert result.ok
    assert result.payload == {
        "exp": 1749339782,
        "iat": "soon",
        "exp_readable": "2025-06-07T23:43:02.000Z",
    }


def test_decode_token_readable_passes_failures_through():
    result = decode_token_readable("a.b")

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.FORMAT


def test_use_case_contains_unexpected_backend_errors():
    class ExplodingDecoder:
        def decode(self, token: str) -> DecodedToken:
            raise RuntimeError("backend fault")

    result = DecodeTokenUseCase(token_decoder=ExplodingDecoder()).execute("a.b.c")

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.DECODE
    assert result.error == "Failed to decode token: backend fault"


def test_compact_decoder_raises_domain_errors(make_token):
    header = make_token().split(".")[0]

    with pytest.raises(ClaimsParseError):
        CompactTokenDecoder().decode(f"{header}.{b64url_encode(b'')}.sig")


# --------------------------------------------------------------------------- #
# PyJWT backend
# --------------------------------------------------------------------------- #


def test_pyjwt_backend_agrees_with_compact_backend():
    claims = {"sub": "user-1", "exp": 1749339782, "roles": ["a", "b"], "name": "Zoë"}
    token = jwt.encode(claims, SECRET, algorithm="HS256", headers={"kid": "key-1"})

    compact = DecodeTokenUseCase(token_decoder=CompactTokenDecoder()).execute(token)
    library = DecodeTokenUseCase(token_decoder=PyJWTTokenDecoder()).execute(token)

    assert compact.ok and library.ok
    assert compact.to_dict() == library.to_dict()
    assert library.payload == claims
    assert library.header["kid"] == "key-1"


def test_pyjwt_backend_ignores_expiry_and_signature():
    token = jwt.encode({"exp": 1, "iat": "not-a-number", "sub": "42"}, SECRET, algorithm="HS256")

    result = DecodeTokenUseCase(token_decoder=PyJWTTokenDecoder()).execute(token, complete=True)

    assert result.ok
    assert result.payload["exp"] == 1
    assert result.signature == token.split(".")[2]


def test_pyjwt_backend_failures(make_token):
    use_case = DecodeTokenUseCase(token_decoder=PyJWTTokenDecoder())
    header = make_token().split(".")[0]

    fmt = use_case.execute("a.b")
    assert isinstance(fmt, DecodeFailure)
    assert fmt.error == "Invalid JWT format: token must have 3 parts."

    parse = use_case.execute(f"{header}.{b64url_encode(b'not json')}.c2ln")
    assert isinstance(parse, DecodeFailure)
    assert parse.stage is ErrorStage.PARSE
    assert parse.error.startswith("Failed to decode token: ")

    garbage = use_case.execute("e$$.e$$.e$$")
    assert isinstance(garbage, DecodeFailure)


# --------------------------------------------------------------------------- #
# Facade
# --------------------------------------------------------------------------- #


def test_inspect_reports_missing_token(make_token):
    inspector = create_inspector_dependencies()

    for token in [None, ""]:
        result = inspector.inspect(token)
        assert isinstance(result, DecodeFailure)
        assert result.stage is ErrorStage.MISSING
        assert result.error == "No token provided"

    readable = inspector.inspect(make_token(payload={"auth_time": 0}), readable=True)
    assert readable.payload["auth_time_readable"] == "1970-01-01T00:00:00.000Z"


def test_create_inspector_dependencies():
    inspector = create_inspector_dependencies(backend="pyjwt", timestamp_claims=["nbf"])

    assert isinstance(inspector, InspectorDependencies)
    assert isinstance(inspector.decode_use_case.token_decoder, PyJWTTokenDecoder)
    assert inspector.format_claims({"nbf": 0, "exp": 0}) == {
        "nbf": 0,
        "exp": 0,
        "nbf_readable": "1970-01-01T00:00:00.000Z",
    }

    with pytest.raises(ValueError):
        create_inspector_dependencies(backend="unknown")


# --------------------------------------------------------------------------- #
# Non-standard JSON
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize("raw", [b'{"exp": NaN}', b'{"x": Infinity}', b'{"x": -Infinity}'])
@pytest.mark.parametrize("decoder_cls", [CompactTokenDecoder, PyJWTTokenDecoder])
def test_non_finite_constants_are_a_parse_error(make_token, decoder_cls, raw):
    header = make_token().split(".")[0]

    result = DecodeTokenUseCase(token_decoder=decoder_cls()).execute(
        f"{header}.{b64url_encode(raw)}.c2ln"
    )

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.PARSE
    assert result.error.startswith("Failed to decode token: payload: ")


@pytest.mark.parametrize("decoder_cls", [CompactTokenDecoder, PyJWTTokenDecoder])
def test_invalid_utf8_stage_matches_across_backends(make_token, decoder_cls):
    header = make_token().split(".")[0]
    invalid_utf8 = b64url_encode(b'{"a": "\xff"}')

    result = DecodeTokenUseCase(token_decoder=decoder_cls()).execute(f"{header}.{invalid_utf8}.c2ln")

    assert isinstance(result, DecodeFailure)
    assert result.stage is ErrorStage.DECODE


def test_lone_surrogate_escape_decodes(make_token):
    result = decode_token(make_token(payload={"name": "\ud800"}))

    assert result.ok
    assert result.payload == {"name": "\ud800"}
