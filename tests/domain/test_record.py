from __future__ import annotations

from pathlib import Path

from aboutinfo.domain.about import AboutFields, AboutInfo, ImageReference

from tests._about_utils import StubDescriptor


class _Version:
    def __str__(self) -> str:
        return "3.0.1.v20240101"


def test_empty_record_has_no_values() -> None:
    about = AboutInfo("org.example.product")
    assert about.feature_id == "org.example.product"
    for name in (
        "app_name",
        "product_name",
        "provider_name",
        "version",
        "feature_label",
        "about_text",
        "window_image",
        "about_image",
        "feature_image",
        "feature_image_name",
        "feature_image_crc",
        "welcome_page",
    ):
        assert getattr(about, name) is None, name


def test_delegated_fields_read_through_descriptor(tmp_path: Path) -> None:
    descriptor = StubDescriptor(tmp_path, label="Workbench", provider_name="Example Corp")
    about = AboutInfo("org.example.product", _Version(), descriptor)

    assert about.product_name == "Workbench"
    assert about.feature_label == "Workbench"
    assert about.provider_name == "Example Corp"
    assert about.version == "3.0.1.v20240101"

    descriptor.label = "Renamed"
    assert about.product_name == "Renamed"


def test_to_dict_serialises_paths_and_checksum(tmp_path: Path) -> None:
    fields = AboutFields(
        app_name="workbench",
        about_image=ImageReference(tmp_path / "about.gif"),
        welcome_page=tmp_path / "welcome.xml",
    )
    payload = AboutInfo("feature", "1.0", None, fields).to_dict()

    assert payload["app_name"] == "workbench"
    assert payload["about_image"] == (tmp_path / "about.gif").as_posix()
    assert payload["welcome_page"] == (tmp_path / "welcome.xml").as_posix()
    assert payload["feature_image_crc"] is None
    assert payload["version"] == "1.0"
    assert "feature_image_crc" not in AboutInfo("feature").to_dict(include_checksum=False)
