"""
Integration tests for FingerprintCommand, the orchestration layer used by the CLI.
Verifies wiring of scanner → fingerprinter → grouper with failure collection.
"""
import pytest
from unittest import mock

from cfprint import FingerprintCommand, FingerprintParams, FingerprintMode
from cfprint.core.fingerprint import fingerprint_bytes, FingerprinterImpl

CONTENT_A = b"public class A { }"


class TestFingerprintCommand:

    def test_execute_fingerprints_all_files(self, test_files, temp_dir):
        params = FingerprintParams(root_dir=str(temp_dir), extensions=[".jar"])
        files, groups, stats = FingerprintCommand().execute(params)

        assert len(files) == 6
        assert groups == []
        assert stats.total_files == 6
        assert stats.fingerprinted_files == 6
        assert stats.failed_files == {}
        by_name = {f.name: f.fingerprint for f in files}
        assert by_name["a.jar"] == fingerprint_bytes(CONTENT_A)
        assert by_name["empty.jar"] == 1540447798

    def test_execute_finds_groups(self, test_files, temp_dir):
        params = FingerprintParams(root_dir=str(temp_dir), extensions=[".jar"], find_duplicates=True)
        _, groups, stats = FingerprintCommand().execute(params)

        assert len(groups) == 1
        assert groups[0].file_count == 4  # a, a_copy, a_reformatted, nested
        assert stats.groups_found == 1

    def test_execute_exact_groups(self, test_files, temp_dir):
        params = FingerprintParams(
            root_dir=str(temp_dir), extensions=[".jar"], find_duplicates=True, exact=True
        )
        _, groups, _ = FingerprintCommand().execute(params)

        assert len(groups) == 1
        assert "a_reformatted.jar" not in {f.name for f in groups[0].files}

    def test_normalized_mode_gives_same_numbers(self, test_files, temp_dir):
        standard, _, _ = FingerprintCommand().execute(FingerprintParams(root_dir=str(temp_dir)))
        normalized, _, _ = FingerprintCommand().execute(
            FingerprintParams(root_dir=str(temp_dir), mode=FingerprintMode.NORMALIZED)
        )
        assert [f.fingerprint for f in standard] == [f.fingerprint for f in normalized]

    def test_execute_raises_error_on_empty_scan(self, temp_dir):
        params = FingerprintParams(root_dir=str(temp_dir), extensions=[".jar"])
        with pytest.raises(RuntimeError, match="No files found"):
            FingerprintCommand().execute(params)

    def test_read_errors_are_collected(self, test_files, temp_dir):
        """One unreadable file must not abort the batch."""
        real_open = open
        broken = str(test_files["b"])

        def flaky_open(path, *args, **kwargs):
            if str(path) == broken:
                raise PermissionError(13, "Permission denied", broken)
            return real_open(path, *args, **kwargs)

        params = FingerprintParams(root_dir=str(temp_dir), extensions=[".jar"])
        with mock.patch("builtins.open", side_effect=flaky_open):
            files, _, stats = FingerprintCommand().execute(params)

        assert broken not in {f.path for f in files}
        assert len(files) == 5
        assert list(stats.failed_files) == [broken]
        assert "Permission denied" in stats.failed_files[broken]

    def test_cancellation_stops_fingerprinting(self, test_files, temp_dir):
        """Stopping after the first file keeps what was done and skips grouping."""
        state = {"stop": False}
        real_compute = FingerprinterImpl.compute_file

        def compute_then_stop(self, path):
            state["stop"] = True
            return real_compute(self, path)

        params = FingerprintParams(root_dir=str(temp_dir), extensions=[".jar"], find_duplicates=True)
        with mock.patch.object(FingerprinterImpl, "compute_file", compute_then_stop):
            files, groups, stats = FingerprintCommand().execute(params, stopped_flag=lambda: state["stop"])

        assert len(files) == 1
        assert stats.fingerprinted_files == 1
        assert groups == []

    def test_cancellation_during_scan_returns_empty_result(self, test_files, temp_dir):
        """A cancel while scanning is not reported as an empty-scan error."""
        calls = {"count": 0}

        def stop_after_two_checks():
            calls["count"] += 1
            return calls["count"] > 2

        params = FingerprintParams(root_dir=str(temp_dir))
        files, groups, stats = FingerprintCommand().execute(params, stopped_flag=stop_after_two_checks)

        assert files == []
        assert groups == []
        assert stats.fingerprinted_files == 0

    def test_progress_reports_fingerprinting_stage(self, test_files, temp_dir):
        stages = []
        params = FingerprintParams(root_dir=str(temp_dir))
        FingerprintCommand().execute(params, progress_callback=lambda s, c, t: stages.append((s, c, t)))

        assert ("fingerprinting", 7, 7) in stages

    def test_get_files_returns_copy(self, test_files, temp_dir):
        command = FingerprintCommand()
        command.execute(FingerprintParams(root_dir=str(temp_dir)))
        files = command.get_files()
        files.clear()
        assert len(command.get_files()) == 7

    def test_injected_grouper_is_used(self, test_files, temp_dir):
        """Any FileGrouper implementation can replace the default grouper."""
        grouper = mock.Mock()
        grouper.find_groups.return_value = []

        params = FingerprintParams(root_dir=str(temp_dir), find_duplicates=True, exact=True)
        files, groups, _ = FingerprintCommand(grouper=grouper).execute(params)

        grouper.find_groups.assert_called_once_with(files, exact=True)
        assert groups == []
