"""
Tests for the Sonarr custom format and naming bindings.
"""

import pytest

from starr_client.sonarr import (
    ColonReplacement, CustomFormatInput, CustomFormatInputSpec, CustomFormatOutput, Naming, Sonarr,
)
from starr_client.types import FieldInput


@pytest.fixture
def sonarr(api):
    return Sonarr(api)


def x265(**kwargs):
    return CustomFormatInput(
        name="x265",
        include_cf_when_renaming=True,
        specifications=[CustomFormatInputSpec(
            name="x265",
            implementation="ReleaseTitleSpecification",
            fields=[FieldInput(name="value", value="[xh]\\.?265")],
        )],
        **kwargs,
    )


class TestCustomFormats:

    def test_add(self, sonarr, fake_session):
        fake_session.queue_json({"id": 8, "name": "x265", "includeCustomFormatWhenRenaming": True})
        cf = x265(id=3)

        created = sonarr.add_custom_format(cf)

        sent = fake_session.last
        assert sent.method == "POST"
        assert sent.path == "/api/v3/customFormat"
        body = sent.json()
        assert "id" not in body
        assert body["includeCustomFormatWhenRenaming"] is True
        assert body["specifications"][0]["fields"] == [{"name": "value", "value": "[xh]\\.?265"}]
        assert created.id == 8
        assert created.include_cf_when_renaming is True
        assert cf.id == 3

    def test_add_none_makes_no_call(self, sonarr, fake_session):
        assert sonarr.add_custom_format(None) == CustomFormatOutput()
        assert fake_session.requests == []

    def test_keyword_arguments(self, sonarr, fake_session):
        fake_session.queue_json({"id": 8}, 200)
        fake_session.queue_json({"id": 8}, 200)

        sonarr.add_custom_format(custom_format=x265())
        sonarr.update_custom_format(custom_format=x265(id=8))

        assert [r.method for r in fake_session.requests] == ["POST", "PUT"]
        assert fake_session.last.path == "/api/v3/customFormat/8"

    def test_get_custom_formats(self, sonarr, fake_session):
        fake_session.queue_json([{"id": 1, "name": "x265", "specifications": [
            {"name": "x265", "implementationName": "Release Title", "fields": [{"name": "value", "value": "265"}]},
        ]}])

        formats = sonarr.get_custom_formats()

        assert formats[0].specifications[0].implementation_name == "Release Title"
        assert formats[0].specifications[0].fields[0].value == "265"

    def test_get_custom_format(self, sonarr, fake_session):
        fake_session.queue_json({"id": 4, "name": "HDR"})
        assert sonarr.get_custom_format(4).name == "HDR"
        assert fake_session.last.path == "/api/v3/customFormat/4"

    def test_update(self, sonarr, fake_session):
        fake_session.queue_json({"id": 3, "name": "x265"})
        sonarr.update_custom_format(x265(id=3))
        assert fake_session.last.method == "PUT"
        assert fake_session.last.path == "/api/v3/customFormat/3"
        assert fake_session.last.json()["id"] == 3

    def test_delete(self, sonarr, fake_session):
        sonarr.delete_custom_format(3)
        assert fake_session.last.method == "DELETE"
        assert fake_session.last.path == "/api/v3/customFormat/3"


class TestNaming:

    def test_get_naming(self, sonarr, fake_session):
        fake_session.queue_json({"id": 1, "renameEpisodes": True, "colonReplacementFormat": 4,
                                 "standardEpisodeFormat": "{Series Title} - S{season:00}E{episode:00}"})

        naming = sonarr.get_naming()

        assert naming.rename_episodes is True
        assert naming.colon_replacement_format == ColonReplacement.SMART_REPLACE
        assert fake_session.last.path == "/api/v3/config/naming"

    def test_update_naming_forces_id(self, sonarr, fake_session):
        fake_session.queue_json({"id": 1, "renameEpisodes": True})

        sonarr.update_naming(Naming(rename_episodes=True, colon_replacement_format=ColonReplacement.CUSTOM,
                                    custom_colon_replacement_format="-"))

        sent = fake_session.last
        assert sent.method == "PUT"
        assert sent.path == "/api/v3/config/naming"
        body = sent.json()
        assert body["id"] == 1
        assert body["colonReplacementFormat"] == 5
        assert body["customColonReplacementFormat"] == "-"
