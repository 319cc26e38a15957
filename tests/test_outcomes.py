import pytest

from codeprobs_cli.client.models import AnswerError
from codeprobs_cli.client.outcomes import (
    ANSWER_CREATED,
    ANSWER_DELETED,
    ANSWER_NOT_CREATED,
    ANSWER_NOT_FOUND,
    ANSWER_REJECTED,
    INVALID_CREDENTIALS,
    PERMISSION_NOT_MET,
    UNRECOGNIZED_REASON,
    USER_CREATED,
    USER_NOT_CREATED,
    classify_answer_post,
    classify_delete,
    classify_signup,
)


def test_signup_success_statuses_have_distinct_messages():
    created = classify_signup(201, "")
    accepted = classify_signup(200, "")
    assert created.message == USER_CREATED
    assert accepted.message == USER_NOT_CREATED
    assert created.message != accepted.message
    assert created.success and accepted.success


@pytest.mark.parametrize("status", [400, 409, 500])
def test_signup_other_status_echoes_body(status):
    body = "Username already taken\n  (try another)"
    outcome = classify_signup(status, body)
    assert not outcome.success
    assert outcome.detail == body


def test_answer_post_422_carries_decoded_error():
    error = AnswerError(reason="Compile error", stderr="line 1: syntax error")
    outcome = classify_answer_post(422, "{}", error)
    assert outcome.message == ANSWER_REJECTED
    assert outcome.error is error
    assert outcome.detail is None


def test_answer_post_success_and_fallback():
    assert classify_answer_post(201, "").message == ANSWER_CREATED
    assert classify_answer_post(200, "").message == ANSWER_NOT_CREATED

    outcome = classify_answer_post(401, "Bad credentials")
    assert not outcome.success
    assert outcome.detail == "Bad credentials"


@pytest.mark.parametrize(
    "status, message",
    [
        (204, ANSWER_DELETED),
        (403, PERMISSION_NOT_MET),
        (404, ANSWER_NOT_FOUND),
        (401, INVALID_CREDENTIALS),
        (500, UNRECOGNIZED_REASON),
        (418, UNRECOGNIZED_REASON),
    ],
)
def test_delete_status_mapping(status, message):
    assert classify_delete(status).message == message


def test_delete_rejections_are_never_confused():
    messages = {classify_delete(s).message for s in (401, 403, 404)}
    assert len(messages) == 3
    assert classify_delete(204).success
    assert not any(classify_delete(s).success for s in (401, 403, 404, 500))


def test_unrecognized_delete_discards_status_and_body():
    outcome = classify_delete(502)
    assert outcome.detail is None
    assert outcome.error is None
