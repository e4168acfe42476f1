"""Unit tests for the Submission model."""

import pytest

from formrelay.models.submission import Submission


@pytest.mark.unit
def test_from_form_reads_known_fields_only():
    submission = Submission.from_form({
        "name": "Kim",
        "contact": "010",
        "privacy_agree": "on",
        "cf-turnstile-response": "token",
        "unexpected": "ignored",
    })

    assert submission.name == "Kim"
    assert submission.contact == "010"
    assert submission.privacy_agree == "on"
    assert submission.third_party_agree is None
    assert submission.url_params == {}


@pytest.mark.unit
def test_missing_text_fields_default_to_empty():
    submission = Submission.from_form({})
    assert submission.name == ""
    assert submission.contact == ""


@pytest.mark.unit
def test_url_params_from_json_object():
    submission = Submission.from_form({"url_params": '{"utm_source": "naver", "n": 3, "empty": null}'})
    assert submission.url_params == {"utm_source": "naver", "n": "3", "empty": ""}


@pytest.mark.unit
def test_url_params_from_query_string():
    submission = Submission.from_form({"url_params": "?utm_source=google&utm_campaign=spring_2024"})
    assert submission.url_params == {"utm_source": "google", "utm_campaign": "spring_2024"}


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "   ", "[1, 2]", '"text"'])
def test_url_params_unusable_values_are_dropped(raw):
    assert Submission.from_form({"url_params": raw}).url_params == {}


@pytest.mark.unit
def test_consent_requires_exact_marker():
    submission = Submission(privacy_agree="on", third_party_agree="yes", marketing_agree="ON")

    assert submission.consented("privacy_agree")
    assert not submission.consented("third_party_agree")
    assert not submission.consented("marketing_agree")


@pytest.mark.unit
def test_consent_label_reflects_presence():
    submission = Submission(privacy_agree="on", third_party_agree="yes")

    assert submission.consent_label("privacy_agree") == "동의 ✅"
    assert submission.consent_label("third_party_agree") == "동의 ✅"
    assert submission.consent_label("marketing_agree") == "비동의 ❌"
