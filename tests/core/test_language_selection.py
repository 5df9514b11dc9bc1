from __future__ import annotations

import pytest

from porichoy.core import assemble, pick
from porichoy.errors import MissingData
from porichoy.schemas import Locale, ProfileDocument, UserIdentity


@pytest.mark.parametrize(
    "primary, secondary, prefer_secondary, expected",
    [
        ("Engineer", "প্রকৌশলী", True, "প্রকৌশলী"),
        ("Engineer", "প্রকৌশলী", False, "Engineer"),
        ("Engineer", "", True, "Engineer"),
        ("Engineer", "   ", True, "Engineer"),
        ("Engineer", None, True, "Engineer"),
        ("", "প্রকৌশলী", False, ""),
        (None, None, True, ""),
    ],
)
def test_pick_follows_language_rule(primary, secondary, prefer_secondary, expected):
    assert pick(primary, secondary, prefer_secondary=prefer_secondary) == expected


def test_assemble_resolves_bangla_variants(profile_data, bangla_user):
    document = assemble(profile_data, bangla_user)

    assert document.locale is Locale.BN
    assert document.header.name == "রহিম উদ্দিন"
    assert document.header.profession == "ব্যাকএন্ড প্রকৌশলী"
    assert document.header.location == "ঢাকা"
    assert document.experience[0].company == "পাঠাও"
    assert document.experience[0].date_range == "জানু ২০২০ - বর্তমান"
    # Missing Bangla name falls back to the English one.
    assert [skill.name for skill in document.skills] == ["Python", "পোস্টগ্রেস"]


def test_assemble_resolves_english_variants(profile_data, english_user):
    document = assemble(profile_data, english_user)

    assert document.header.name == "Rahim Uddin"
    assert document.experience[0].position == "Software Engineer"
    assert document.experience[0].date_range == "Jan 2020 - Present"
    assert document.skills[0].stars == 4
    assert document.skills[1].level == "Advanced"


def test_display_name_falls_back_to_user_name(english_user):
    document = assemble({"personalInfo": {"fullName": "", "fullNameBn": ""}}, english_user)

    assert document.header.name == "Rahim Uddin"


def test_other_empty_fields_stay_empty(bangla_user):
    document = assemble({"personalInfo": {}}, bangla_user)

    assert document.header.profession == ""
    assert document.header.location == ""
    assert document.experience == ()


def test_assemble_accepts_validated_models(profile_data):
    profile = ProfileDocument.model_validate(profile_data)
    user = UserIdentity(name="Karim", locale=Locale.EN, username="karim")

    document = assemble(profile, user)

    assert document.username == "karim"


@pytest.mark.parametrize(
    "profile, user",
    [
        (None, {"name": "A", "locale": "en", "username": "a"}),
        ({}, None),
        ("not an object", {"name": "A", "locale": "en", "username": "a"}),
        ({}, ["a", "list"]),
        ({}, {"name": "A", "locale": "fr", "username": "a"}),
        ({}, {"name": "A", "locale": "en"}),
        ({"skills": [{"name": "Go", "level": "guru"}]}, {"name": "A", "username": "a"}),
    ],
)
def test_assemble_rejects_missing_or_malformed_input(profile, user):
    with pytest.raises(MissingData) as exc:
        assemble(profile, user)

    assert exc.value.kind == "MissingData"
    assert exc.value.to_dict()["kind"] == "MissingData"


def test_links_are_normalised_and_unsafe_schemes_dropped(english_user):
    document = assemble(
        {
            "contact": {
                "website": "rahim.dev",
                "linkedin": "https://linkedin.com/in/rahim",
                "github": "javascript:alert(1)",
            }
        },
        english_user,
    )

    assert [(link.label, link.url) for link in document.header.links] == [
        ("Website", "https://rahim.dev"),
        ("LinkedIn", "https://linkedin.com/in/rahim"),
    ]


def test_malformed_link_hosts_are_dropped(english_user):
    document = assemble(
        {
            "contact": {
                "website": "https://[evil]/x",
                "linkedin": "http://[::1",
                "github": "https://github.com/rahim",
            },
            "projects": [{"name": "Tool", "url": "https://[bad", "githubUrl": "http://[::1"}],
            "certifications": [{"name": "CKA", "credentialUrl": "https://[evil]/cert"}],
        },
        english_user,
    )

    assert [(link.label, link.url) for link in document.header.links] == [
        ("GitHub", "https://github.com/rahim"),
    ]
    assert document.projects[0].links == ()
    assert document.certifications[0].credential_url == ""
