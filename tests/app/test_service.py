from __future__ import annotations

from pathlib import Path

from aboutinfo.adapters.fs_feature_registry import DirectoryFeatureRegistry
from aboutinfo.app.about import AboutInfoService

from tests._about_utils import CHECK_BYTES, CHECK_CRC, RecordingReporter, write_feature

FEATURE_ID = "org.example.product"


def _install(root: Path) -> Path:
    return write_feature(
        root,
        FEATURE_ID,
        files={
            "about.ini": "aboutText=%blurb\nfeatureImage=feature.gif\nappName=workbench\n",
            "about.properties": "%blurb=Version {0}\n",
            "about.mappings": "0=2.1.0\n",
            "nl/de/about.properties": "%blurb=Fassung {0}\n",
            "feature.gif": CHECK_BYTES,
        },
    )


def test_service_loads_feature(tmp_path: Path) -> None:
    _install(tmp_path)
    reporter = RecordingReporter()
    service = AboutInfoService(DirectoryFeatureRegistry(tmp_path, nl="en_US"), reporter)

    about = service.load(FEATURE_ID, "2.1.0")

    assert reporter.reports == []
    assert about.about_text == "Version 2.1.0"
    assert about.app_name == "workbench"
    assert about.product_name == "Example Product"
    assert about.provider_name == "Example Corp"
    assert about.version == "2.1.0"
    assert about.feature_image_crc == CHECK_CRC


def test_service_prefers_national_language_variant(tmp_path: Path) -> None:
    _install(tmp_path)
    service = AboutInfoService(DirectoryFeatureRegistry(tmp_path, nl="de_CH"), RecordingReporter())

    about = service.load(FEATURE_ID)

    assert about.about_text == "Fassung 2.1.0"
    assert about.version is None


def test_unknown_feature_yields_empty_record_and_one_report(tmp_path: Path) -> None:
    reporter = RecordingReporter()
    service = AboutInfoService(DirectoryFeatureRegistry(tmp_path), reporter)

    about = service.load("org.example.missing", "1.0")

    assert len(reporter.reports) == 1
    assert about.product_name is None
    assert about.provider_name is None
    assert about.about_text is None
    assert about.feature_image_crc is None


def test_missing_about_ini_reports_once(tmp_path: Path) -> None:
    write_feature(tmp_path, FEATURE_ID)
    reporter = RecordingReporter()
    service = AboutInfoService(DirectoryFeatureRegistry(tmp_path), reporter)

    about = service.load(FEATURE_ID)

    assert len(reporter.reports) == 1
    assert "about.ini" in reporter.reports[0][0]
    assert about.about_text is None
    assert about.product_name == "Example Product"


def test_custom_file_names(tmp_path: Path) -> None:
    write_feature(tmp_path, FEATURE_ID, files={"product.ini": "appName=custom\n"})
    service = AboutInfoService(DirectoryFeatureRegistry(tmp_path), RecordingReporter(), ini_name="product.ini")

    assert service.load(FEATURE_ID).app_name == "custom"


def test_overlong_image_names_load_without_error(tmp_path: Path) -> None:
    long_name = "x" * 300 + ".gif"
    write_feature(
        tmp_path,
        FEATURE_ID,
        files={"about.ini": f"appName=workbench\nwindowImage={long_name}\nfeatureImage={long_name}\n"},
    )
    reporter = RecordingReporter()
    service = AboutInfoService(DirectoryFeatureRegistry(tmp_path, nl="de_CH"), reporter)

    about = service.load(FEATURE_ID)

    assert reporter.reports == []
    assert about.app_name == "workbench"
    assert about.window_image is None
    assert about.feature_image is None
    assert about.feature_image_name == long_name
    assert about.feature_image_crc is None


def test_load_descriptor_skips_registry_lookup(tmp_path: Path) -> None:
    _install(tmp_path)
    registry = DirectoryFeatureRegistry(tmp_path)
    descriptor = registry.get_descriptor(FEATURE_ID)
    assert descriptor is not None
    lookups: list[str] = []

    class _CountingRegistry:
        def get_descriptor(self, feature_id: str):
            lookups.append(feature_id)
            return registry.get_descriptor(feature_id)

    about = AboutInfoService(_CountingRegistry(), RecordingReporter()).load_descriptor(FEATURE_ID, descriptor, "2.1.0")

    assert lookups == []
    assert about.about_text == "Version 2.1.0"
    assert about.version == "2.1.0"
