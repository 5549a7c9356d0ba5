"""Tests for raw payload decoding and job normalization."""

import pytest

from job_post_studio.exceptions import PayloadDecodeError
from job_post_studio.models.job import ContactDetails, Job
from job_post_studio.parsers.payload_decoder import decode_payload
from job_post_studio.pipeline.job_normalizer import extract_contact_details, normalize_job
from job_post_studio.utils.field_resolver import SCALAR_FIELDS


class TestDecodePayload:
    def test_missing_sections_become_empty(self):
        payload = decode_payload({"job_post": {"Job Title": "Baker"}})
        assert payload.voice == {}
        assert payload.image == {}
        assert payload.present == frozenset({"job_post"})

    def test_null_sections_become_empty(self):
        payload = decode_payload({"job_post": None, "voice": None, "image": None})
        assert payload.job_post == {}
        assert payload.present == frozenset()

    def test_json_text_is_parsed(self):
        payload = decode_payload('{"image": {"Headline": "Hi"}}')
        assert payload.image == {"Headline": "Hi"}

    def test_double_encoded_text_is_parsed(self):
        payload = decode_payload('"{\\"job_post\\": {\\"Job Title\\": \\"Baker\\"}}"')
        assert payload.job_post == {"Job Title": "Baker"}

    @pytest.mark.parametrize("raw", [None, 42, ["job_post"], "Something went wrong"])
    def test_non_record_payload_raises(self, raw):
        with pytest.raises(PayloadDecodeError):
            decode_payload(raw)

    def test_non_record_section_raises(self):
        with pytest.raises(PayloadDecodeError, match="voice"):
            decode_payload({"voice": "just a string"})


class TestNormalizeJob:
    def test_english_payload(self, raw_english_payload):
        job = normalize_job(raw_english_payload)
        assert job.job_title == "Baker"
        assert job.headline == "Bake with us"
        assert job.introduction_of_job == "Join our early shift."
        assert job.personal_address == "Dear bakers,"
        assert job.call_to_action == "Apply now!"
        assert job.tasks == ["Bake bread", "Clean oven"]
        assert job.qualifications == ["Completed apprenticeship", "Team player"]
        assert job.benefits == ["Free bread", "30 days vacation"]
        assert job.voice_script == "Are you a baker?"
        assert job.voice_location == "Hamburg"
        assert job.image_keyword == "bakery"
        assert job.taglines == ["Fresh every day", "Since 1921"]
        assert job.body_copy == ["Early shift, great team"]
        assert job.closing_date == "2026-12-31"
        assert job.contact_details.contact_person == "Anna Schmidt"

    def test_german_payload(self, raw_german_payload):
        job = normalize_job(raw_german_payload)
        assert job.job_title == "Bäcker"
        assert job.introduction == "Familienbäckerei seit 1921."
        assert job.introduction_of_job == "Frühschicht im Team."
        assert job.personal_address == "Liebe Bäcker,"
        assert job.tasks == ["Brot backen", "Ofen reinigen"]
        assert job.qualifications == ["Ausbildung", "Teamgeist"]
        assert job.benefits == ["Freies Brot"]

    def test_title_without_tasks(self):
        job = normalize_job({"job_post": {"Job Title": "Baker"}, "voice": {}, "image": {}})
        assert job.job_title == "Baker"
        assert job.tasks == []

    def test_german_title_with_bullet_tasks(self):
        job = normalize_job(
            {"job_post": {"Berufsbezeichnung": "Bäcker", "Tasks": "Bake bread▶Clean oven"}}
        )
        assert job.job_title == "Bäcker"
        assert job.tasks == ["Bake bread", "Clean oven"]

    def test_english_key_wins_over_german(self):
        job = normalize_job({"job_post": {"Berufsbezeichnung": "Bäcker", "Job Title": "Baker"}})
        assert job.job_title == "Baker"

    def test_empty_english_key_falls_through(self):
        job = normalize_job({"job_post": {"Job Title": "", "Jobtitel": "Bäcker"}})
        assert job.job_title == "Bäcker"

    def test_container_value_falls_through_to_next_spelling(self):
        job = normalize_job({"job_post": {"Job Title": {"text": "x"}, "Berufsbezeichnung": "Bäcker"}})
        assert job.job_title == "Bäcker"

    def test_all_defaults_for_empty_payload(self):
        job = normalize_job({})
        for spec in SCALAR_FIELDS:
            assert getattr(job, spec.name) == Job.default_for(spec.name)
        assert job.tasks == job.qualifications == job.benefits == []
        assert job.taglines == job.body_copy == []
        assert job.contact_details == ContactDetails()
        assert job.voice is None
        assert job.job_post is None

    def test_documented_defaults(self):
        job = normalize_job({})
        assert job.job_title == "No job title available"
        assert job.headline == "No headline available"
        assert job.voice_cta == "No Call to Action specified"
        assert job.closing_date == "No closing date provided"
        assert job.contact_details.email == "No email provided"

    def test_scalars_are_never_none(self, raw_german_payload):
        job = normalize_job(raw_german_payload)
        for spec in SCALAR_FIELDS:
            value = getattr(job, spec.name)
            assert isinstance(value, str) and value

    def test_record_without_items(self):
        job = normalize_job({"job_post": {"Tasks": {"header": "Tasks"}}})
        assert job.tasks == []

    def test_raw_sections_echoed(self, raw_english_payload):
        job = normalize_job(raw_english_payload)
        assert job.voice == raw_english_payload["voice"]
        assert job.job_post == raw_english_payload["job_post"]

    def test_deterministic(self, raw_english_payload):
        first = normalize_job(raw_english_payload)
        second = normalize_job(raw_english_payload)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_input_not_mutated(self, raw_german_payload):
        before = repr(raw_german_payload)
        normalize_job(raw_german_payload)
        assert repr(raw_german_payload) == before

    def test_decode_error_propagates(self):
        with pytest.raises(PayloadDecodeError):
            normalize_job("Something went wrong")


class TestContactDetails:
    def test_missing(self):
        assert extract_contact_details({}) == ContactDetails()

    def test_partial_record_keeps_sentinels(self):
        contact = extract_contact_details({"contact_details": {"email": "a@b.de"}})
        assert contact.email == "a@b.de"
        assert contact.phone == "No phone provided"

    def test_non_record(self):
        assert extract_contact_details({"contact_details": "call us"}) == ContactDetails()
