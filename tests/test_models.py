"""
Unit tests for data models: parameters validation, groups and statistics.
"""
import pytest

from cfprint.core.models import (
    FingerprintMode,
    FingerprintedFile,
    FingerprintGroup,
    FingerprintParams,
    FingerprintStats,
)


class TestFingerprintedFile:

    def test_name_and_extension_derived_from_path(self):
        file = FingerprintedFile(path="/mods/JEI-1.20.JAR", size=10)
        assert file.name == "JEI-1.20.JAR"
        assert file.extension == ".jar"
        assert file.fingerprint is None


class TestFingerprintGroup:

    def test_size_and_count(self):
        group = FingerprintGroup(fingerprint=5, files=[
            FingerprintedFile(path="/a", size=10, fingerprint=5),
            FingerprintedFile(path="/b", size=12, fingerprint=5),
        ])
        assert group.file_count == 2
        assert group.size == 22


class TestFingerprintParams:

    def test_extensions_normalized(self):
        params = FingerprintParams(root_dir="/tmp", extensions=["JAR", " .Zip ", ""])
        assert params.extensions == [".jar", ".zip"]

    @pytest.mark.parametrize("kwargs", [
        {"root_dir": ""},
        {"root_dir": "/tmp", "min_size_bytes": -1},
        {"root_dir": "/tmp", "min_size_bytes": 10, "max_size_bytes": 5},
        {"root_dir": "/tmp", "exact": True},
    ])
    def test_invalid_params(self, kwargs):
        with pytest.raises(ValueError):
            FingerprintParams(**kwargs)

    def test_from_human_readable(self):
        params = FingerprintParams.from_human_readable(
            root_dir="/tmp",
            min_size_str="1K",
            max_size_str="2MB",
            extensions_str="jar, zip",
            mode=FingerprintMode.NORMALIZED,
        )
        assert params.min_size_bytes == 1024
        assert params.max_size_bytes == 2 * 1024 * 1024
        assert params.extensions == [".jar", ".zip"]
        assert params.mode is FingerprintMode.NORMALIZED

    def test_empty_max_size_means_unbounded(self):
        params = FingerprintParams.from_human_readable(root_dir="/tmp")
        assert params.max_size_bytes is None


class TestFingerprintStats:

    def test_summary_lists_failures(self):
        stats = FingerprintStats(total_files=3, fingerprinted_files=2, total_bytes=2048)
        stats.record_failure("/x.jar", PermissionError("denied"))
        summary = stats.print_summary()
        assert "Files fingerprinted: 2 [2.00KB]" in summary
        assert "Failed files: 1" in summary
        assert stats.failed_files == {"/x.jar": "denied"}


class TestFingerprintMode:

    def test_display_values(self):
        assert FingerprintMode("standard") is FingerprintMode.STANDARD
        assert FingerprintMode.NORMALIZED.display_name == "Normalized"
        assert "Murmur2" in FingerprintMode.STANDARD.description
